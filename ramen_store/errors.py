class OrderError(Exception):
    """
    Base class for every failure raised while placing an order.

    Subclasses carry a default message that is safe to show to API clients.
    Internal variants (allocation, catalog, persistence) are never shown as-is;
    the orchestrator folds them into `CouldNotPlaceOrder`.
    """

    message = "order error"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.message
        super().__init__(self.detail)


class MissingParameters(OrderError):
    message = "both brothId and proteinId are required"


class CouldNotPlaceOrder(OrderError):
    message = "could not place order"


class AllocationFailed(OrderError):
    message = "could not allocate an order id"


class CatalogLookupFailed(OrderError):
    message = "catalog item not found"


class PersistenceFailed(OrderError):
    message = "could not persist order"


class DuplicateOrder(PersistenceFailed):
    message = "order id already stored"
