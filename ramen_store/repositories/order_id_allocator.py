import asyncio
import logging

import httpx
from pydantic import ValidationError

from ramen_store.errors import AllocationFailed
from ramen_store.interfaces.order_interface import AbstractOrderIdAllocator
from ramen_store.schemas.order_schema import GenerateIdResponse

logger = logging.getLogger(__name__)


class OrderIdAllocator(AbstractOrderIdAllocator):
    """
    Client for the external service that issues order ids.

    One `POST` with an empty body, authenticated with a pre-shared key in the
    `x-api-key` header. A single failed attempt fails the call; there are no
    retries.

    Attributes:
        http_client (httpx.AsyncClient): Shared client, owned by the application.
        url (str): Allocator endpoint.
        api_key (str): Pre-shared key for the allocator.
        timeout (float): Upper bound, in seconds, for the whole exchange.
    """

    def __init__(
        self, http_client: httpx.AsyncClient, url: str, api_key: str, timeout: float
    ):
        self.http_client = http_client
        self.url = url
        self.api_key = api_key
        self.timeout = timeout

    async def allocate_order_id(self) -> str:
        """
        Request a new order id.

        Returns:
            str: The allocator-issued id, verbatim.

        Raises:
            AllocationFailed: On transport errors or timeouts, a non-2xx status,
            or a body without a usable `orderId`.
        """
        try:
            async with asyncio.timeout(self.timeout):
                response = await self.http_client.post(
                    self.url,
                    headers={"x-api-key": self.api_key},
                    timeout=self.timeout,
                )
        except TimeoutError as e:
            raise AllocationFailed(
                f"Order id allocator did not answer within {self.timeout}s"
            ) from e
        except httpx.HTTPError as e:
            raise AllocationFailed(f"Order id allocator unreachable: {e!r}") from e

        if not response.is_success:
            raise AllocationFailed(
                f"Order id allocator answered with status {response.status_code}"
            )

        try:
            body = GenerateIdResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise AllocationFailed("Failed to parse order id response") from e

        logger.debug("Allocated order id %s", body.order_id)
        return body.order_id
