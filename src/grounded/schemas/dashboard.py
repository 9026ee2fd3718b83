"""
Dashboard snapshot schemas
"""
from datetime import datetime
from typing import List, Optional

from grounded.schemas.base import BaseSchema


class DashboardStats(BaseSchema):
    active_jobs: int
    total_clients: int
    pending_invoices: int
    outstanding_amount: float
    revenue_this_month: float


class ScheduleEntry(BaseSchema):
    id: int
    client: str
    service: str
    time: str
    address: str
    status: str


class RecentLead(BaseSchema):
    id: int
    name: str
    email: str
    service: Optional[str] = None
    status: str
    created_at: datetime


class ActivityEntry(BaseSchema):
    id: str
    action: str
    client: str
    amount: Optional[str] = None
    timestamp: datetime
    time_ago: str


class DashboardSnapshot(BaseSchema):
    stats: DashboardStats
    today_schedule: List[ScheduleEntry]
    recent_leads: List[RecentLead]
    recent_activity: List[ActivityEntry]
