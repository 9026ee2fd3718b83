"""
Daily route schemas
"""
from datetime import date
from typing import List, Optional

from grounded.schemas.base import BaseSchema


class RouteStop(BaseSchema):
    job_id: int
    title: str
    client: Optional[str] = None
    time: Optional[str] = None
    address: str
    status: str
    maps_url: str


class RouteSummary(BaseSchema):
    total: int
    pending: int
    in_progress: int
    completed: int


class RouteResponse(BaseSchema):
    date: date
    stops: List[RouteStop]
    summary: RouteSummary
    route_url: Optional[str] = None
