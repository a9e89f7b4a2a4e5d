import secrets
from typing import Annotated

from fastapi import Depends, Security
from fastapi.security import APIKeyHeader

from ramen_store.config import Settings, get_settings

api_key_header = APIKeyHeader(
    name="x-api-key",
    scheme_name="ApiKey",
    description="API Key needed to access the endpoints",
    auto_error=False,
)


class ApiKeyRejected(Exception):
    """Raised by `verify_api_key`; rendered as a 403 by the application."""

    def __init__(self, body: dict):
        self.body = body
        super().__init__(body)


async def verify_api_key(
    settings: Annotated[Settings, Depends(get_settings)],
    x_api_key: Annotated[str | None, Security(api_key_header)],
) -> None:
    """
    Gatekeeper for every route: the `x-api-key` header must match the configured key.

    Raises:
        ApiKeyRejected: If the header is missing, blank, or does not match.
    """
    if x_api_key is None or not x_api_key.strip():
        raise ApiKeyRejected({"error": "x-api-key header missing"})
    if not settings.api_key or not secrets.compare_digest(
        x_api_key.encode(), settings.api_key.encode()
    ):
        raise ApiKeyRejected({"message": "Forbidden"})
