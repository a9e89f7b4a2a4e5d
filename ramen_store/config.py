from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Service-wide configuration, read once from the environment (and `.env`) at startup.

    Attributes:
        database_url (str): SQLAlchemy async database url.
        api_key (str): Key clients must send in the `x-api-key` header.
        allocator_url (str): Endpoint that issues new order ids.
        allocator_api_key (str): Pre-shared key sent to the allocator.
        allocator_timeout (float): Seconds to wait for the allocator.
        persistence_backend (str): `inline` writes from the web process,
            `celery` hands the write to a worker.
        persistence_timeout (float): Seconds an inline write may take.
        persistence_max_retries (int): Retries a worker makes before giving up.
        celery_broker_url (str): Broker used by the persistence worker.
        seed_catalog (bool): Insert the default broths and proteins on startup.
        log_level (str): Root logging level.
    """

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", frozen=True, populate_by_name=True
    )

    database_url: str = "sqlite+aiosqlite:///ramen_store.db"
    api_key: str = ""
    allocator_url: str = Field(
        default="https://api.tech.redventures.com.br/orders/generate-id",
        validation_alias="ORDER_ID_ALLOCATOR_URL",
    )
    allocator_api_key: str = Field(default="", validation_alias="ORDER_ID_ALLOCATOR_API_KEY")
    allocator_timeout: float = Field(
        default=5.0, gt=0, validation_alias="ORDER_ID_ALLOCATOR_TIMEOUT"
    )
    persistence_backend: Literal["inline", "celery"] = Field(
        default="inline", validation_alias="ORDER_PERSISTENCE_BACKEND"
    )
    persistence_timeout: float = Field(
        default=10.0, gt=0, validation_alias="ORDER_PERSISTENCE_TIMEOUT"
    )
    persistence_max_retries: int = Field(
        default=3, ge=0, validation_alias="ORDER_PERSISTENCE_MAX_RETRIES"
    )
    celery_broker_url: str = "redis://localhost:6379/0"
    seed_catalog: bool = True
    log_level: str = "INFO"

    @field_validator("persistence_backend", mode="before")
    @classmethod
    def lower_backend(cls, value):
        return value.lower() if isinstance(value, str) else value

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
