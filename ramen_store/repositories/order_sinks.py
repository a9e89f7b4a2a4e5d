import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ramen_store.interfaces.order_interface import AbstractOrderSink
from ramen_store.repositories.order_persistence_task import persist_order_task
from ramen_store.repositories.order_repository import OrderRepository
from ramen_store.schemas.order_schema import OrderRecord

logger = logging.getLogger(__name__)


class DatabaseOrderSink(AbstractOrderSink):
    """Writes orders from the web process, each in a session of its own."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def store(self, order: OrderRecord) -> None:
        async with self.session_factory() as session:
            await OrderRepository(async_session=session).place_order(order)


class CeleryOrderSink(AbstractOrderSink):
    """
    Hands orders to the persistence worker through the Celery broker.

    The write itself, with its retries, happens in `persist_order_task`.
    Publishing blocks on the broker connection, so it runs in a thread.
    """

    async def store(self, order: OrderRecord) -> None:
        result = await asyncio.to_thread(persist_order_task.delay, order.model_dump())
        logger.info("Order %s queued for persistence as task %s", order.id, result.id)
