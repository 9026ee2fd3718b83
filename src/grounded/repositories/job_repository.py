"""
Job data access
"""
from datetime import date
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import joinedload

from grounded.models import Job
from grounded.models.job import ACTIVE_JOB_STATUSES
from grounded.repositories.base_repository import BaseRepository


class JobRepository(BaseRepository[Job]):
    model = Job

    def list_all(self) -> List[Job]:
        """Scheduled jobs first by date, then unscheduled; newest first within a date"""
        return (
            self.db.query(Job)
            .options(joinedload(Job.client), joinedload(Job.assigned_to))
            .order_by(
                Job.scheduled_date.is_(None),
                Job.scheduled_date.asc(),
                Job.created_at.desc(),
                Job.id.desc(),
            )
            .all()
        )

    def find_for_date(self, day: date, limit: Optional[int] = None) -> List[Job]:
        """Jobs on a calendar day ordered by time, untimed jobs last"""
        query = (
            self.db.query(Job)
            .options(joinedload(Job.client))
            .filter(Job.scheduled_date == day)
            .order_by(Job.scheduled_time.is_(None), Job.scheduled_time.asc(), Job.id.asc())
        )
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def count_active(self) -> int:
        return (
            self.db.query(func.count(Job.id))
            .filter(Job.status.in_(ACTIVE_JOB_STATUSES))
            .scalar()
            or 0
        )
