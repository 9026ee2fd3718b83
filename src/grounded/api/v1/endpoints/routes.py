"""
Daily route endpoint
"""
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from grounded.api.v1.dependencies import get_current_user
from grounded.core.dependencies import get_db
from grounded.schemas.routes import RouteResponse
from grounded.services.route_service import RouteService
from grounded.utils.exceptions import PersistenceError
from grounded.utils.helpers import utcnow
from grounded.utils.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("/routes", response_model=RouteResponse)
async def get_route(
    day: Optional[date] = Query(None, alias="date", description="Calendar day, defaults to today (UTC)"),
    db: Session = Depends(get_db),
):
    """
    The day's jobs in scheduled-time order, with a directions link that
    visits them in that order.
    """
    target = day or utcnow().date()
    try:
        return RouteResponse.model_validate(RouteService(db).get_route(target))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error building route for {target}:[/red] {e}")
        raise PersistenceError("Failed to build route")
