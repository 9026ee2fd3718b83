"""
Dashboard snapshot endpoint
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import sessionmaker

from grounded.api.v1.dependencies import get_current_user
from grounded.core.dependencies import get_db_session_factory
from grounded.schemas.dashboard import DashboardSnapshot
from grounded.services.dashboard_service import DashboardService

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("/dashboard", response_model=DashboardSnapshot)
async def get_dashboard(session_factory: sessionmaker = Depends(get_db_session_factory)):
    """
    Counts, money totals, today's schedule and recent activity.
    Any failed read fails the whole request with a 500.
    """
    snapshot = await DashboardService(session_factory).get_snapshot()
    return DashboardSnapshot.model_validate(snapshot)
