import pytest
import pytest_asyncio
from sqlalchemy import insert

from ramen_store.config import Settings
from ramen_store.db.db_connection import build_engine, build_session_factory, create_schema
from ramen_store.errors import AllocationFailed
from ramen_store.models.app_models import Broth, Protein
from ramen_store.services.order_service import drain_pending_writes
from ramen_store.tests.fakes import FakeAllocator, FakeCatalog, RecordingSink


@pytest.fixture
def allocator() -> FakeAllocator:
    return FakeAllocator("ord-42", "ord-43")


@pytest.fixture
def failing_allocator() -> FakeAllocator:
    return FakeAllocator(error=AllocationFailed("Order id allocator answered with status 503"))


@pytest.fixture
def catalog() -> FakeCatalog:
    return FakeCatalog(proteins={"p1": "Pork"}, broths={"b1": "Miso"})


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'ramen_store.db'}",
        api_key="test-key",
        allocator_url="https://allocator.test/orders/generate-id",
        allocator_api_key="allocator-key",
        allocator_timeout=1.0,
        persistence_timeout=1.0,
        seed_catalog=False,
    )


@pytest_asyncio.fixture
async def session_factory(settings):
    engine = build_engine(settings.database_url)
    await create_schema(engine)
    factory = build_session_factory(engine)
    async with factory() as session:
        await session.execute(
            insert(Protein), [{"id": "p1", "name": "Pork"}, {"id": "p2", "name": "Chicken"}]
        )
        await session.execute(insert(Broth), [{"id": "b1", "name": "Miso"}])
        await session.commit()
    yield factory
    await engine.dispose()


@pytest_asyncio.fixture
async def async_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture(autouse=True)
async def no_pending_writes():
    yield
    await drain_pending_writes()
