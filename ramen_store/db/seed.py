import logging

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from ramen_store.models.app_models import Broth, Protein

logger = logging.getLogger(__name__)

IMAGE_HOST = "https://tech.redventures.com.br/icons"

DEFAULT_BROTHS = [
    {
        "id": "1",
        "name": "Salt",
        "description": "Simple like the seawater, nothing more",
        "price": 10,
        "image_inactive": f"{IMAGE_HOST}/salt/inactive.svg",
        "image_active": f"{IMAGE_HOST}/salt/active.svg",
    },
    {
        "id": "2",
        "name": "Shoyu",
        "description": "The good old and traditional soy sauce",
        "price": 10,
        "image_inactive": f"{IMAGE_HOST}/shoyu/inactive.svg",
        "image_active": f"{IMAGE_HOST}/shoyu/active.svg",
    },
    {
        "id": "3",
        "name": "Miso",
        "description": "Paste made of fermented soybeans",
        "price": 12,
        "image_inactive": f"{IMAGE_HOST}/miso/inactive.svg",
        "image_active": f"{IMAGE_HOST}/miso/active.svg",
    },
]

DEFAULT_PROTEINS = [
    {
        "id": "1",
        "name": "Chasu",
        "description": "A sliced flavourful pork meat with a selection of season vegetables.",
        "price": 10,
        "image_inactive": f"{IMAGE_HOST}/pork/inactive.svg",
        "image_active": f"{IMAGE_HOST}/pork/active.svg",
    },
    {
        "id": "2",
        "name": "Yasai Vegetarian",
        "description": "A delicious vegetarian lamen with a selection of season vegetables.",
        "price": 10,
        "image_inactive": f"{IMAGE_HOST}/yasai/inactive.svg",
        "image_active": f"{IMAGE_HOST}/yasai/active.svg",
    },
    {
        "id": "3",
        "name": "Karaague",
        "description": "Three units of fried chicken, moyashi, ajitama egg and other vegetables.",
        "price": 12,
        "image_inactive": f"{IMAGE_HOST}/chicken/inactive.svg",
        "image_active": f"{IMAGE_HOST}/chicken/active.svg",
    },
]


async def seed_catalog(async_session: AsyncSession) -> None:
    """Insert the default broths and proteins into empty catalog tables."""
    for model, rows in ((Broth, DEFAULT_BROTHS), (Protein, DEFAULT_PROTEINS)):
        count = (
            await async_session.execute(select(func.count()).select_from(model))
        ).scalar_one()
        if count:
            continue
        await async_session.execute(insert(model), rows)
        logger.info("Seeded %d rows into %s", len(rows), model.__tablename__)
    await async_session.commit()
