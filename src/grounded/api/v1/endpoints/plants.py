"""
Public plant catalog endpoints
"""
from typing import List, Optional, Union

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from grounded.core.dependencies import get_db
from grounded.schemas.plants import PlantCreate, PlantListResponse, PlantResponse
from grounded.services.plant_service import PlantService
from grounded.utils.exceptions import PersistenceError
from grounded.utils.logging import get_logger

logger = get_logger(__name__)
router = APIRouter()


@router.get("/plants", response_model=PlantListResponse)
async def get_plants(
    q: Optional[str] = Query(None, description="Search common/scientific name, cultivar and genus"),
    plant_type: Optional[str] = Query(None, alias="plantType"),
    category: Optional[str] = Query(None),
    sun: Optional[str] = Query(None, description="Sun exposure the plant tolerates"),
    water: Optional[str] = Query(None, description="Water needs"),
    zone: Optional[int] = Query(None, description="USDA hardiness zone"),
    tag: Optional[str] = Query(None),
    design_use: Optional[str] = Query(None, alias="designUse"),
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=500),
    db: Session = Depends(get_db),
):
    """
    List active plants ordered by common name, filtered and paginated.
    """
    try:
        plants, total = PlantService(db).search_plants(
            page=page,
            limit=limit,
            q=q,
            plant_type=plant_type,
            category=category,
            sun=sun,
            water=water,
            zone=zone,
            tag=tag,
            design_use=design_use,
        )
        return {
            "plants": [PlantResponse.model_validate(plant) for plant in plants],
            "total": total,
            "page": page,
            "limit": limit,
        }
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error fetching plants:[/red] {e}")
        raise PersistenceError("Failed to fetch plants")


@router.post(
    "/plants",
    response_model=Union[PlantResponse, List[PlantResponse]],
    status_code=status.HTTP_201_CREATED,
)
async def create_plants(
    payload: Union[PlantCreate, List[PlantCreate]] = Body(...),
    db: Session = Depends(get_db),
):
    """
    Add one plant (object body) or several (array body).
    """
    try:
        records = payload if isinstance(payload, list) else [payload]
        plants = [PlantResponse.model_validate(plant) for plant in PlantService(db).create_plants(records)]
        return plants if isinstance(payload, list) else plants[0]
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error creating plants:[/red] {e}")
        raise PersistenceError("Failed to create plant")
