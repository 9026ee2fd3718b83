"""
Dashboard snapshot: counts, money totals and recent activity

The snapshot is built from seven reads that do not depend on each other.
They run concurrently on the thread pool, each with its own session, and
the snapshot is only assembled once all of them have succeeded.
"""
import asyncio
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from grounded.models.job import service_type_label
from grounded.repositories.client_repository import ClientRepository
from grounded.repositories.invoice_repository import InvoiceRepository
from grounded.repositories.job_repository import JobRepository
from grounded.repositories.lead_repository import LeadRepository
from grounded.utils.exceptions import PersistenceError
from grounded.utils.helpers import format_currency, format_time_ago, utcnow
from grounded.utils.logging import get_logger

logger = get_logger(__name__)

SCHEDULE_LIMIT = 5
RECENT_LEAD_DAYS = 7
RECENT_LEAD_LIMIT = 3
RECENT_PAID_LIMIT = 3
ACTIVITY_LIMIT = 5


def start_of_month(now: datetime) -> datetime:
    return now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def _count_active_jobs(db: Session, now: datetime, today: date) -> int:
    return JobRepository(db).count_active()


def _count_clients(db: Session, now: datetime, today: date) -> int:
    return ClientRepository(db).count()


def _outstanding_invoices(db: Session, now: datetime, today: date) -> Dict[str, Any]:
    invoices = InvoiceRepository(db).find_outstanding()
    amount = sum((invoice.total - invoice.amount_paid for invoice in invoices), Decimal("0"))
    return {"count": len(invoices), "amount": amount}


def _revenue_this_month(db: Session, now: datetime, today: date) -> Decimal:
    invoices = InvoiceRepository(db).find_paid_since(start_of_month(now))
    return sum((invoice.total for invoice in invoices), Decimal("0"))


def _todays_schedule(db: Session, now: datetime, today: date) -> List[Dict[str, Any]]:
    jobs = JobRepository(db).find_for_date(today, limit=SCHEDULE_LIMIT)
    return [
        {
            "id": job.id,
            "client": job.client_name or "",
            "service": service_type_label(job.service_type),
            "time": job.scheduled_time or "TBD",
            "address": job.job_address,
            "status": job.status,
        }
        for job in jobs
    ]


def _recent_leads(db: Session, now: datetime, today: date) -> List[Dict[str, Any]]:
    since = now - timedelta(days=RECENT_LEAD_DAYS)
    return [
        {
            "id": lead.id,
            "name": lead.name,
            "email": lead.email,
            "service": lead.service,
            "status": lead.status,
            "created_at": lead.created_at,
        }
        for lead in LeadRepository(db).find_created_since(since, RECENT_LEAD_LIMIT)
    ]


def _recently_paid(db: Session, now: datetime, today: date) -> List[Dict[str, Any]]:
    return [
        {
            "id": invoice.id,
            "client": invoice.client_name or "",
            "total": invoice.total,
            "paid_date": invoice.paid_date,
        }
        for invoice in InvoiceRepository(db).find_recently_paid(RECENT_PAID_LIMIT)
    ]


def build_recent_activity(
    paid_invoices: List[Dict[str, Any]],
    leads: List[Dict[str, Any]],
    now: datetime,
    limit: int = ACTIVITY_LIMIT,
) -> List[Dict[str, Any]]:
    """Paid invoices and new leads merged newest first, truncated to ``limit``"""
    entries = []
    for invoice in paid_invoices:
        timestamp = invoice["paid_date"] or now
        entries.append({
            "id": f"inv-{invoice['id']}",
            "action": "Invoice paid",
            "client": invoice["client"],
            "amount": format_currency(invoice["total"]),
            "timestamp": timestamp,
            "time_ago": format_time_ago(timestamp, now),
        })
    for lead in leads:
        entries.append({
            "id": f"lead-{lead['id']}",
            "action": "New lead received",
            "client": lead["name"],
            "amount": None,
            "timestamp": lead["created_at"],
            "time_ago": format_time_ago(lead["created_at"], now),
        })

    entries.sort(key=lambda entry: entry["timestamp"], reverse=True)
    return entries[:limit]


class DashboardService:
    """Computes the dashboard snapshot"""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def _read(self, read: Callable, now: datetime, today: date):
        db = self.session_factory()
        try:
            return read(db, now, today)
        finally:
            db.close()

    async def get_snapshot(self, now: Optional[datetime] = None, today: Optional[date] = None) -> Dict[str, Any]:
        """
        Build the snapshot for ``now`` and the calendar day ``today``, both UTC.

        Raises:
            PersistenceError: if any read fails; no partial snapshot is returned
        """
        now = now or utcnow()
        today = today or now.date()

        reads = (
            _count_active_jobs,
            _count_clients,
            _outstanding_invoices,
            _revenue_this_month,
            _todays_schedule,
            _recent_leads,
            _recently_paid,
        )
        try:
            results = await asyncio.gather(
                *(run_in_threadpool(self._read, read, now, today) for read in reads)
            )
        except Exception as e:
            logger.error(f"[red]Dashboard snapshot failed:[/red] {e}")
            raise PersistenceError("Failed to fetch dashboard data") from e

        active_jobs, total_clients, outstanding, revenue, schedule, leads, paid = results

        return {
            "stats": {
                "active_jobs": active_jobs,
                "total_clients": total_clients,
                "pending_invoices": outstanding["count"],
                "outstanding_amount": float(outstanding["amount"]),
                "revenue_this_month": float(revenue),
            },
            "today_schedule": schedule,
            "recent_leads": leads,
            "recent_activity": build_recent_activity(paid, leads, now),
        }
