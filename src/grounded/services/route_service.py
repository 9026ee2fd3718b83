"""
Daily route list for field crews

The route is the order the day's jobs were scheduled in. No distance or
travel-time optimisation is attempted.
"""
from datetime import date, datetime
from typing import Any, Dict, Iterable, List

from sqlalchemy.orm import Session

from grounded.external.maps import directions_url, search_url
from grounded.models import Job
from grounded.models.job import JobStatus
from grounded.repositories.job_repository import JobRepository


def calendar_day(value):
    """The date part of a date or datetime"""
    return value.date() if isinstance(value, datetime) else value


def route_sort_key(job: Job):
    """Timed jobs by HH:MM, untimed jobs after all of them"""
    return (job.scheduled_time is None, job.scheduled_time or "")


def summarize_day(jobs: List[Job]) -> Dict[str, int]:
    """Job counts for the day; scheduled jobs count as pending"""
    statuses = [job.status for job in jobs]
    return {
        "total": len(statuses),
        "pending": sum(1 for status in statuses if status in (JobStatus.PENDING.value, JobStatus.SCHEDULED.value)),
        "in_progress": statuses.count(JobStatus.IN_PROGRESS.value),
        "completed": statuses.count(JobStatus.COMPLETED.value),
    }


def build_route(jobs: Iterable[Job], target_date: date) -> Dict[str, Any]:
    """
    Order the jobs scheduled on ``target_date`` and link them into one route.

    Jobs on other dates (or with no date) are dropped. The sort is stable, so
    jobs sharing a time keep their incoming order.
    """
    day_jobs = sorted(
        (job for job in jobs if job.scheduled_date is not None and calendar_day(job.scheduled_date) == target_date),
        key=route_sort_key,
    )

    stops: List[Dict[str, Any]] = []
    for job in day_jobs:
        address = job.full_address
        stops.append({
            "job_id": job.id,
            "title": job.title,
            "client": job.client_name,
            "time": job.scheduled_time,
            "address": address,
            "status": job.status,
            "maps_url": search_url(address),
        })

    return {
        "date": target_date,
        "stops": stops,
        "summary": summarize_day(day_jobs),
        "route_url": directions_url([stop["address"] for stop in stops]),
    }


class RouteService:
    """Reads a day's jobs and builds the route for it"""

    def __init__(self, db: Session):
        self.db = db
        self.repository = JobRepository(db)

    def get_route(self, target_date: date) -> Dict[str, Any]:
        return build_route(self.repository.find_for_date(target_date), target_date)
