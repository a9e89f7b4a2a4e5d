from abc import ABC, abstractmethod

from ramen_store.schemas.catalog_schemas import BrothRead, ProteinRead


class AbstractCatalogInterface(ABC):
    """
    Abstract base class defining the contract for catalog lookups.

    The catalog is read only. Lookups by id raise `CatalogLookupFailed` when no
    record matches; listings return every record.

    Methods:
        get_protein_by_id(): Resolve one protein.
        get_broth_by_id(): Resolve one broth.
        list_proteins(): Every protein in the catalog.
        list_broths(): Every broth in the catalog.
    """

    @abstractmethod
    async def get_protein_by_id(self, protein_id: str) -> ProteinRead:
        pass

    @abstractmethod
    async def get_broth_by_id(self, broth_id: str) -> BrothRead:
        pass

    @abstractmethod
    async def list_proteins(self) -> list[ProteinRead]:
        pass

    @abstractmethod
    async def list_broths(self) -> list[BrothRead]:
        pass
