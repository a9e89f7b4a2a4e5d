import asyncio
import logging

from ramen_store.errors import CouldNotPlaceOrder, MissingParameters
from ramen_store.interfaces.catalog_interface import AbstractCatalogInterface
from ramen_store.interfaces.order_interface import (
    AbstractOrderIdAllocator,
    AbstractOrderSink,
)
from ramen_store.schemas.order_schema import (
    OrderRecord,
    PlaceOrderRequest,
    PlaceOrderResponse,
)

logger = logging.getLogger(__name__)

# Detached persistence tasks. The event loop only keeps weak references to
# tasks, so they are held here until they finish.
_pending_writes: set[asyncio.Task] = set()


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


async def drain_pending_writes() -> None:
    """Wait for every persistence task started so far."""
    while _pending_writes:
        await asyncio.gather(*list(_pending_writes), return_exceptions=True)


class OrderService:
    """
    Coordinates the placement of one order.

    Validates the request, asks the allocator for an id, resolves the protein
    and the broth, then answers with the composed order while the sink stores
    it in the background. The caller never waits for, nor hears about, the
    write.

    Attributes:
        allocator (AbstractOrderIdAllocator): Source of order ids.
        catalog (AbstractCatalogInterface): Protein and broth lookups.
        sink (AbstractOrderSink): Destination for placed orders.
        persistence_timeout (float): Seconds a background write may take.
    """

    def __init__(
        self,
        allocator: AbstractOrderIdAllocator,
        catalog: AbstractCatalogInterface,
        sink: AbstractOrderSink,
        persistence_timeout: float = 10.0,
    ):
        self.allocator = allocator
        self.catalog = catalog
        self.sink = sink
        self.persistence_timeout = persistence_timeout

    async def place_order(self, order_data: PlaceOrderRequest) -> PlaceOrderResponse:
        """
        Place an order for one broth and one protein.

        Returns:
            PlaceOrderResponse: The allocator-issued id, the description and an
            empty image placeholder.

        Raises:
            MissingParameters: If either id is missing or blank. Nothing else is
                called in that case.
            CouldNotPlaceOrder: If the allocator or a catalog lookup fails. The
                underlying error is logged and chained, never exposed.
        """
        if _is_blank(order_data.protein_id) or _is_blank(order_data.broth_id):
            raise MissingParameters()

        try:
            order_id = await self.allocator.allocate_order_id()
            protein = await self.catalog.get_protein_by_id(order_data.protein_id)
            broth = await self.catalog.get_broth_by_id(order_data.broth_id)
        except Exception as e:
            logger.exception(
                "Could not place order for protein %r and broth %r",
                order_data.protein_id,
                order_data.broth_id,
            )
            raise CouldNotPlaceOrder() from e

        order = OrderRecord(
            id=order_id,
            broth_id=broth.id,
            protein_id=protein.id,
            description=f"{broth.name} and {protein.name} Ramen",
            image_url="",
        )
        self._schedule_persistence(order)

        logger.info("Order %s placed: %s", order.id, order.description)
        return PlaceOrderResponse(
            id=order.id, description=order.description, image=order.image_url
        )

    def _schedule_persistence(self, order: OrderRecord) -> None:
        task = asyncio.create_task(
            self._persist(order), name=f"persist-order-{order.id}"
        )
        _pending_writes.add(task)
        task.add_done_callback(_pending_writes.discard)

    async def _persist(self, order: OrderRecord) -> None:
        try:
            await asyncio.wait_for(
                self.sink.store(order), timeout=self.persistence_timeout
            )
        except Exception:
            # the caller already has its response; the log is the only record
            logger.exception(
                "Persistence failed for order %s (%s)", order.id, order.model_dump()
            )
