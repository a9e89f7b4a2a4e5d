import json
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, Response, Security, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ramen_store.config import Settings, get_settings
from ramen_store.dependencies import (
    get_catalog_repository,
    get_order_id_allocator,
    get_order_sink,
)
from ramen_store.errors import CouldNotPlaceOrder, MissingParameters
from ramen_store.interfaces.catalog_interface import AbstractCatalogInterface
from ramen_store.interfaces.order_interface import (
    AbstractOrderIdAllocator,
    AbstractOrderSink,
)
from ramen_store.schemas.order_schema import (
    ErrorResponse,
    PlaceOrderRequest,
    PlaceOrderResponse,
)
from ramen_store.security import verify_api_key
from ramen_store.services.order_service import OrderService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/orders", tags=["orders"], dependencies=[Security(verify_api_key)]
)


async def read_place_order_request(request: Request) -> PlaceOrderRequest:
    """
    Parse the order body after the api key check has passed.

    A body that is not a JSON object, or ids that are not strings, yield an
    empty request, which the service rejects as missing parameters.
    """
    try:
        payload = await request.json()
        return PlaceOrderRequest.model_validate(payload)
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
        logger.warning("Unreadable order body: %s", e)
        return PlaceOrderRequest()


@router.post(
    "",
    name="placeOrder",
    response_model=PlaceOrderResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        403: {"description": "Missing or invalid x-api-key"},
        500: {"model": ErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": PlaceOrderRequest.model_json_schema()}
            },
        }
    },
)
async def place_order(
    order_data: Annotated[PlaceOrderRequest, Depends(read_place_order_request)],
    response: Response,
    allocator: Annotated[AbstractOrderIdAllocator, Depends(get_order_id_allocator)],
    catalog: Annotated[AbstractCatalogInterface, Depends(get_catalog_repository)],
    sink: Annotated[AbstractOrderSink, Depends(get_order_sink)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> PlaceOrderResponse:
    """
    Place an order for one broth and one protein.

    The order id comes from the external allocator. The order is stored after
    the response is sent, so a 201 does not guarantee the order is durable yet.

    Returns:
        PlaceOrderResponse: `id`, `description` and `image` of the new order.

    Raises:
        400: If `brothId` or `proteinId` is missing, blank or not a string,
            or the body is not a JSON object.
        500: If the order id or the catalog items could not be obtained.
    """
    try:
        service = OrderService(
            allocator=allocator,
            catalog=catalog,
            sink=sink,
            persistence_timeout=settings.persistence_timeout,
        )
        placed = await service.place_order(order_data)
    except MissingParameters as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"error": e.detail}
        )
    except CouldNotPlaceOrder as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": e.detail},
        )
    except HTTPException:
        raise
    except Exception:
        logger.exception("Unexpected error while placing an order")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": CouldNotPlaceOrder.message},
        )
    response.headers["Location"] = f"/orders/{placed.id}"
    return placed
