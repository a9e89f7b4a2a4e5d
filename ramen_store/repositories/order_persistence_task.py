import asyncio
import logging

from celery import Celery, Task
from sqlalchemy.exc import SQLAlchemyError

from ramen_store.config import get_settings
from ramen_store.db.db_connection import build_engine, build_session_factory
from ramen_store.errors import DuplicateOrder, PersistenceFailed
from ramen_store.repositories.order_repository import OrderRepository
from ramen_store.schemas.order_schema import OrderRecord

logger = logging.getLogger(__name__)

settings = get_settings()

app = Celery(
    "order_persistence_task",
    broker=settings.celery_broker_url,
    include=["ramen_store.repositories.order_persistence_task"],
)
app.conf.task_acks_late = True
app.conf.task_reject_on_worker_lost = True


class OrderPersistenceTask(Task):
    """Logs the full order when every retry is exhausted, so the write can be replayed."""

    def on_failure(self, exc, task_id, args, kwargs, einfo):
        order = args[0] if args else kwargs.get("order")
        logger.error(
            "Giving up on order persistence (task %s): %r. Order payload: %s",
            task_id,
            exc,
            order,
        )


async def write_order(order: dict, database_url: str) -> None:
    """
    Store one order using a short-lived engine.

    Each task invocation runs in its own event loop, so the engine cannot be
    shared with the web process or between invocations.
    """
    engine = build_engine(database_url)
    try:
        async with build_session_factory(engine)() as session:
            await OrderRepository(async_session=session).place_order(
                OrderRecord.model_validate(order)
            )
    finally:
        await engine.dispose()


@app.task(
    base=OrderPersistenceTask,
    autoretry_for=(PersistenceFailed, SQLAlchemyError, OSError),
    # a stored id never becomes writable again
    dont_autoretry_for=(DuplicateOrder,),
    retry_backoff=True,
    retry_jitter=True,
    max_retries=settings.persistence_max_retries,
)
def persist_order_task(order: dict):
    asyncio.run(write_order(order, settings.database_url))
    logger.info("Order %s persisted by worker", order.get("id"))
