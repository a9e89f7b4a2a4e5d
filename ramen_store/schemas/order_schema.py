from pydantic import BaseModel, ConfigDict, Field, field_validator


class PlaceOrderRequest(BaseModel):
    """Body of `POST /orders`. Blank ids are rejected by the service, not here."""

    model_config = ConfigDict(populate_by_name=True)

    protein_id: str | None = Field(default=None, alias="proteinId")
    broth_id: str | None = Field(default=None, alias="brothId")


class PlaceOrderResponse(BaseModel):
    id: str
    description: str
    image: str = ""


class OrderRecord(BaseModel):
    """
    An order as composed at placement time.

    Frozen: it is built once by the order service and handed to a sink
    without further changes.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    broth_id: str = Field(min_length=1)
    protein_id: str = Field(min_length=1)
    description: str
    image_url: str = ""


class GenerateIdResponse(BaseModel):
    """Body returned by the order id allocator."""

    order_id: str = Field(alias="orderId")

    @field_validator("order_id")
    @classmethod
    def order_id_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("orderId must not be blank")
        return value


class ErrorResponse(BaseModel):
    error: str
