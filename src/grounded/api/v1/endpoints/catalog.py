"""
Plant catalog JSON dump and import endpoints
"""
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from grounded.api.v1.dependencies import get_current_user
from grounded.core.config import settings
from grounded.core.dependencies import get_db
from grounded.schemas.plants import CatalogImportResult
from grounded.services.catalog_service import catalog_cache, load_configured_catalog
from grounded.services.plant_service import PlantService
from grounded.utils.exceptions import PersistenceError
from grounded.utils.logging import get_logger

logger = get_logger(__name__)

# Mounted at the site root, outside the versioned API
public_router = APIRouter()
router = APIRouter(dependencies=[Depends(get_current_user)])


def catalog_cache_control() -> str:
    return (
        f"public, s-maxage={settings.catalog.cache_ttl}, "
        f"stale-while-revalidate={settings.catalog.stale_while_revalidate}"
    )


@public_router.get("/catalog.json")
async def get_catalog():
    """
    The whole plant catalog merged from the partition files.
    """
    try:
        catalog = catalog_cache.get()
    except Exception as e:
        logger.error(f"[red]Error loading catalog:[/red] {e}")
        raise PersistenceError("Failed to load catalog")

    return JSONResponse(
        {
            "generatedAt": catalog["generatedAt"],
            "total": catalog["total"],
            "byFile": catalog["byFile"],
            "items": catalog["items"],
        },
        headers={"Cache-Control": catalog_cache_control()},
    )


@router.post("/catalog/import", response_model=CatalogImportResult)
async def import_catalog(db: Session = Depends(get_db)):
    """
    Load the partition files into the plants table, updating plants that
    already exist by scientific name and cultivar.
    """
    try:
        result = PlantService(db).import_catalog(load_configured_catalog())
        catalog_cache.invalidate()
        return result
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error importing catalog:[/red] {e}")
        raise PersistenceError("Failed to import catalog")
