"""
Client data access
"""
from typing import List, Tuple

from sqlalchemy import func, select

from grounded.models import Client, Job, Invoice
from grounded.repositories.base_repository import BaseRepository


class ClientRepository(BaseRepository[Client]):
    model = Client

    def list_with_counts(self) -> List[Tuple[Client, int, int]]:
        """All clients, newest first, with their job and invoice counts"""
        job_count = (
            select(func.count(Job.id)).where(Job.client_id == Client.id).correlate(Client).scalar_subquery()
        )
        invoice_count = (
            select(func.count(Invoice.id)).where(Invoice.client_id == Client.id).correlate(Client).scalar_subquery()
        )
        rows = (
            self.db.query(Client, job_count, invoice_count)
            .order_by(Client.created_at.desc(), Client.id.desc())
            .all()
        )
        return [(client, jobs or 0, invoices or 0) for client, jobs, invoices in rows]
