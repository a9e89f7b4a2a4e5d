from abc import ABC, abstractmethod

from ramen_store.schemas.order_schema import OrderRecord


class AbstractOrderInterface(ABC):
    """
    Abstract base class for the durable order store.

    Any class that inherits from this interface must implement the `place_order`
    method, which writes a fully composed order to storage.
    """

    @abstractmethod
    async def place_order(self, order: OrderRecord) -> None:
        pass


class AbstractOrderSink(ABC):
    """
    Destination handed a placed order after the caller has been answered.

    `store` runs detached from the request, so implementations must not rely on
    request-scoped resources such as the request's database session.
    """

    @abstractmethod
    async def store(self, order: OrderRecord) -> None:
        pass


class AbstractOrderIdAllocator(ABC):
    """Source of globally unique order identifiers."""

    @abstractmethod
    async def allocate_order_id(self) -> str:
        pass
