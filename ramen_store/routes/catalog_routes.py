from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Security, status

from ramen_store.dependencies import get_catalog_repository
from ramen_store.interfaces.catalog_interface import AbstractCatalogInterface
from ramen_store.schemas.catalog_schemas import BrothRead, ProteinRead
from ramen_store.security import verify_api_key
from ramen_store.services.catalog_service import CatalogService

router = APIRouter(tags=["catalog"], dependencies=[Security(verify_api_key)])


@router.get(
    "/broths",
    name="listBroths",
    response_model=list[BrothRead],
    status_code=status.HTTP_200_OK,
    responses={403: {"description": "Missing or invalid x-api-key"}},
)
async def list_broths(
    catalog: Annotated[AbstractCatalogInterface, Depends(get_catalog_repository)],
) -> list[BrothRead]:
    """Every broth that can be ordered."""
    try:
        service = CatalogService(catalog)
        return await service.all_broths()
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"An error occurred: {str(e)}",
        )


@router.get(
    "/proteins",
    name="listProteins",
    response_model=list[ProteinRead],
    status_code=status.HTTP_200_OK,
    responses={403: {"description": "Missing or invalid x-api-key"}},
)
async def list_proteins(
    catalog: Annotated[AbstractCatalogInterface, Depends(get_catalog_repository)],
) -> list[ProteinRead]:
    """Every protein that can be ordered."""
    try:
        service = CatalogService(catalog)
        return await service.all_proteins()
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"An error occurred: {str(e)}",
        )
