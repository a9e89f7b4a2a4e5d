import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ramen_store.config import get_settings
from ramen_store.db.db_connection import async_session_maker, create_schema, engine
from ramen_store.db.seed import seed_catalog
from ramen_store.logging_config import configure_logging
from ramen_store.routes.catalog_routes import router as catalog_router
from ramen_store.routes.order_routes import router as order_router
from ramen_store.security import ApiKeyRejected
from ramen_store.services.order_service import drain_pending_writes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(settings.log_level)
    await create_schema()
    if settings.seed_catalog:
        async with async_session_maker() as session:
            await seed_catalog(session)
    app.state.http_client = httpx.AsyncClient()
    logger.info("Ramen store started, persistence backend: %s", settings.persistence_backend)
    try:
        yield
    finally:
        await drain_pending_writes()
        await app.state.http_client.aclose()
        await engine.dispose()


app = FastAPI(title="RamenStore API", version="v1", lifespan=lifespan)


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ApiKeyRejected)
async def api_key_rejected_handler(request: Request, exc: ApiKeyRejected) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content=exc.body)


app.include_router(catalog_router)
app.include_router(order_router)
