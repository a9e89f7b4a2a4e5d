from typing import Annotated

import httpx
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ramen_store.config import Settings, get_settings
from ramen_store.db.db_connection import async_session_maker, get_async_db
from ramen_store.interfaces.catalog_interface import AbstractCatalogInterface
from ramen_store.interfaces.order_interface import (
    AbstractOrderIdAllocator,
    AbstractOrderSink,
)
from ramen_store.repositories.catalog_repository import CatalogRepository
from ramen_store.repositories.order_id_allocator import OrderIdAllocator
from ramen_store.repositories.order_sinks import CeleryOrderSink, DatabaseOrderSink


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


def get_order_id_allocator(
    http_client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AbstractOrderIdAllocator:
    return OrderIdAllocator(
        http_client=http_client,
        url=settings.allocator_url,
        api_key=settings.allocator_api_key,
        timeout=settings.allocator_timeout,
    )


def get_catalog_repository(
    async_session: Annotated[AsyncSession, Depends(get_async_db)],
) -> AbstractCatalogInterface:
    return CatalogRepository(async_session=async_session)


def get_order_sink(
    settings: Annotated[Settings, Depends(get_settings)],
) -> AbstractOrderSink:
    if settings.persistence_backend == "celery":
        return CeleryOrderSink()
    return DatabaseOrderSink(async_session_maker)
