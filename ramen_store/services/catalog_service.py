from ramen_store.interfaces.catalog_interface import AbstractCatalogInterface
from ramen_store.schemas.catalog_schemas import BrothRead, ProteinRead


class CatalogService:
    """
    Service layer for the catalog listing endpoints.

    Attributes:
        repository (AbstractCatalogInterface): Catalog used for the queries.
    """

    def __init__(self, repository: AbstractCatalogInterface):
        self.repository = repository

    async def all_broths(self) -> list[BrothRead]:
        return await self.repository.list_broths()

    async def all_proteins(self) -> list[ProteinRead]:
        return await self.repository.list_proteins()
