from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ramen_store.errors import CatalogLookupFailed
from ramen_store.interfaces.catalog_interface import AbstractCatalogInterface
from ramen_store.models.app_models import Broth, Protein
from ramen_store.schemas.catalog_schemas import BrothRead, ProteinRead


@dataclass
class CatalogRepository(AbstractCatalogInterface):
    """
    Repository class for reading broths and proteins.

    Every call queries the database; nothing is cached between calls.

    Attributes:
        async_session (AsyncSession | None): The SQLAlchemy async session used for queries.
    """

    async_session: AsyncSession | None = None

    async def get_protein_by_id(self, protein_id: str) -> ProteinRead:
        protein = await self.async_session.get(Protein, protein_id)
        if protein is None:
            raise CatalogLookupFailed(f"No protein with the id {protein_id}")
        return ProteinRead.model_validate(protein)

    async def get_broth_by_id(self, broth_id: str) -> BrothRead:
        broth = await self.async_session.get(Broth, broth_id)
        if broth is None:
            raise CatalogLookupFailed(f"No broth with the id {broth_id}")
        return BrothRead.model_validate(broth)

    async def list_proteins(self) -> list[ProteinRead]:
        result = await self.async_session.execute(select(Protein).order_by(Protein.id))
        return [ProteinRead.model_validate(protein) for protein in result.scalars().all()]

    async def list_broths(self) -> list[BrothRead]:
        result = await self.async_session.execute(select(Broth).order_by(Broth.id))
        return [BrothRead.model_validate(broth) for broth in result.scalars().all()]
