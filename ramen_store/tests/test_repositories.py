import pytest
from sqlalchemy import select

from ramen_store.db.seed import DEFAULT_BROTHS, DEFAULT_PROTEINS, seed_catalog
from ramen_store.errors import CatalogLookupFailed, DuplicateOrder
from ramen_store.models.app_models import Broth, Order, Protein
from ramen_store.repositories import order_sinks
from ramen_store.repositories.catalog_repository import CatalogRepository
from ramen_store.repositories.order_persistence_task import write_order
from ramen_store.repositories.order_repository import OrderRepository
from ramen_store.repositories.order_sinks import CeleryOrderSink, DatabaseOrderSink
from ramen_store.schemas.order_schema import OrderRecord

ORDER = OrderRecord(
    id="ord-42",
    broth_id="b1",
    protein_id="p1",
    description="Miso and Pork Ramen",
)


@pytest.mark.asyncio
async def test_catalog_lookups_by_id(async_session) -> None:
    repo = CatalogRepository(async_session=async_session)

    protein = await repo.get_protein_by_id("p1")
    broth = await repo.get_broth_by_id("b1")

    assert (protein.id, protein.name) == ("p1", "Pork")
    assert (broth.id, broth.name) == ("b1", "Miso")


@pytest.mark.asyncio
async def test_catalog_lookup_of_unknown_id_fails(async_session) -> None:
    repo = CatalogRepository(async_session=async_session)

    with pytest.raises(CatalogLookupFailed):
        await repo.get_protein_by_id("nope")
    with pytest.raises(CatalogLookupFailed):
        await repo.get_broth_by_id("nope")


@pytest.mark.asyncio
async def test_catalog_listings(async_session) -> None:
    repo = CatalogRepository(async_session=async_session)

    proteins = await repo.list_proteins()
    broths = await repo.list_broths()

    assert [protein.name for protein in proteins] == ["Pork", "Chicken"]
    assert [broth.name for broth in broths] == ["Miso"]


@pytest.mark.asyncio
async def test_place_order_stores_the_record(async_session, session_factory) -> None:
    await OrderRepository(async_session=async_session).place_order(ORDER)

    async with session_factory() as session:
        stored = await session.get(Order, "ord-42")

    assert stored is not None
    assert stored.broth_id == "b1"
    assert stored.protein_id == "p1"
    assert stored.description == "Miso and Pork Ramen"
    assert stored.image_url == ""
    assert stored.created_at is not None


@pytest.mark.asyncio
async def test_place_order_twice_with_same_id_fails(session_factory) -> None:
    async with session_factory() as session:
        await OrderRepository(async_session=session).place_order(ORDER)

    async with session_factory() as session:
        with pytest.raises(DuplicateOrder):
            await OrderRepository(async_session=session).place_order(ORDER)


@pytest.mark.asyncio
async def test_database_sink_uses_its_own_session(session_factory) -> None:
    await DatabaseOrderSink(session_factory).store(ORDER)

    async with session_factory() as session:
        ids = (await session.execute(select(Order.id))).scalars().all()

    assert ids == ["ord-42"]


@pytest.mark.asyncio
async def test_worker_write_order(settings, session_factory) -> None:
    await write_order(ORDER.model_dump(), settings.database_url)

    async with session_factory() as session:
        stored = await session.get(Order, "ord-42")

    assert stored.description == "Miso and Pork Ramen"


@pytest.mark.asyncio
async def test_celery_sink_enqueues_the_order(monkeypatch) -> None:
    queued = []

    class Result:
        id = "task-1"

    class Task:
        def delay(self, order: dict):
            queued.append(order)
            return Result()

    monkeypatch.setattr(order_sinks, "persist_order_task", Task())

    await CeleryOrderSink().store(ORDER)

    assert queued == [ORDER.model_dump()]


@pytest.mark.asyncio
async def test_seed_catalog_fills_empty_tables_once(session_factory) -> None:
    async with session_factory() as session:
        await session.execute(Protein.__table__.delete())
        await session.execute(Broth.__table__.delete())
        await session.commit()

        await seed_catalog(session)
        await seed_catalog(session)

        broths = (await session.execute(select(Broth))).scalars().all()
        proteins = (await session.execute(select(Protein))).scalars().all()

    assert len(broths) == len(DEFAULT_BROTHS)
    assert len(proteins) == len(DEFAULT_PROTEINS)
