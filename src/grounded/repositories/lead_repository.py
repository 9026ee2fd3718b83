"""
Lead data access
"""
from datetime import datetime
from typing import List

from grounded.models import Lead
from grounded.repositories.base_repository import BaseRepository


class LeadRepository(BaseRepository[Lead]):
    model = Lead

    def list_all(self) -> List[Lead]:
        return self.db.query(Lead).order_by(Lead.created_at.desc(), Lead.id.desc()).all()

    def find_created_since(self, since: datetime, limit: int) -> List[Lead]:
        return (
            self.db.query(Lead)
            .filter(Lead.created_at >= since)
            .order_by(Lead.created_at.desc(), Lead.id.desc())
            .limit(limit)
            .all()
        )
