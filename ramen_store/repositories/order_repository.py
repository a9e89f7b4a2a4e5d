import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ramen_store.errors import DuplicateOrder, PersistenceFailed
from ramen_store.interfaces.order_interface import AbstractOrderInterface
from ramen_store.models.app_models import Order
from ramen_store.schemas.order_schema import OrderRecord

logger = logging.getLogger(__name__)


@dataclass
class OrderRepository(AbstractOrderInterface):
    async_session: AsyncSession | None = None

    async def place_order(self, order: OrderRecord) -> None:
        """
        Write a composed order to the `order` table.

        Raises:
            DuplicateOrder: If an order with the same id is already stored.
            PersistenceFailed: If the insert or the commit fails for any other
            reason. The session is rolled back before raising either error.
        """
        try:
            self.async_session.add(
                Order(
                    id=order.id,
                    broth_id=order.broth_id,
                    protein_id=order.protein_id,
                    description=order.description,
                    image_url=order.image_url,
                )
            )
            await self.async_session.commit()
        except IntegrityError as e:
            await self.async_session.rollback()
            raise DuplicateOrder(f"Order {order.id} is already stored") from e
        except SQLAlchemyError as e:
            await self.async_session.rollback()
            raise PersistenceFailed(f"Order {order.id} was not stored: {e}") from e
        logger.info("Order %s stored", order.id)
