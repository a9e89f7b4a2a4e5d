import asyncio

import httpx
import pytest

from ramen_store.errors import AllocationFailed
from ramen_store.repositories.order_id_allocator import OrderIdAllocator

URL = "https://allocator.test/orders/generate-id"


def make_allocator(handler) -> tuple[OrderIdAllocator, httpx.AsyncClient]:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return OrderIdAllocator(client, url=URL, api_key="secret", timeout=1.0), client


@pytest.mark.asyncio
async def test_allocate_order_id_posts_with_api_key() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"orderId": "ord-42"})

    allocator, client = make_allocator(handler)
    async with client:
        got = await allocator.allocate_order_id()

    assert got == "ord-42"
    assert len(seen) == 1
    assert seen[0].method == "POST"
    assert str(seen[0].url) == URL
    assert seen[0].headers["x-api-key"] == "secret"
    assert seen[0].content == b""


@pytest.mark.parametrize(
    "response",
    (
        httpx.Response(500, json={"orderId": "ord-42"}),
        httpx.Response(403, json={"message": "Forbidden"}),
        httpx.Response(200, text="not json"),
        httpx.Response(200, json={}),
        httpx.Response(200, json={"orderId": "   "}),
        httpx.Response(200, json={"orderId": None}),
        httpx.Response(200, json=["ord-42"]),
    ),
)
@pytest.mark.asyncio
async def test_allocate_order_id_rejects_bad_answers(response: httpx.Response) -> None:
    allocator, client = make_allocator(lambda request: response)

    async with client:
        with pytest.raises(AllocationFailed):
            await allocator.allocate_order_id()


@pytest.mark.parametrize(
    "error",
    (
        httpx.ReadTimeout("timed out"),
        httpx.ConnectError("connection refused"),
    ),
)
@pytest.mark.asyncio
async def test_allocate_order_id_wraps_transport_errors(error: Exception) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise error

    allocator, client = make_allocator(handler)

    async with client:
        with pytest.raises(AllocationFailed) as exc_info:
            await allocator.allocate_order_id()

    assert exc_info.value.__cause__ is error


@pytest.mark.asyncio
async def test_allocate_order_id_bounds_the_whole_exchange() -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(5)
        return httpx.Response(200, json={"orderId": "ord-42"})

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    allocator = OrderIdAllocator(client, url=URL, api_key="secret", timeout=0.05)

    async with client:
        with pytest.raises(AllocationFailed) as exc_info:
            await allocator.allocate_order_id()

    assert isinstance(exc_info.value.__cause__, TimeoutError)
