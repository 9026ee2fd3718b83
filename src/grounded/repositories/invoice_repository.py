"""
Invoice data access
"""
from datetime import datetime
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import joinedload, selectinload

from grounded.models import Invoice
from grounded.models.invoice import InvoiceStatus, OUTSTANDING_INVOICE_STATUSES
from grounded.repositories.base_repository import BaseRepository


class InvoiceRepository(BaseRepository[Invoice]):
    model = Invoice

    def find_by_id(self, id: int) -> Optional[Invoice]:
        return (
            self.db.query(Invoice)
            .options(joinedload(Invoice.client), joinedload(Invoice.job), selectinload(Invoice.line_items))
            .filter(Invoice.id == id)
            .first()
        )

    def list_all(self) -> List[Invoice]:
        return (
            self.db.query(Invoice)
            .options(joinedload(Invoice.client), joinedload(Invoice.job), selectinload(Invoice.line_items))
            .order_by(Invoice.created_at.desc(), Invoice.id.desc())
            .all()
        )

    def max_sequence(self) -> Optional[int]:
        """Highest invoice number allocated so far, None when there are no invoices"""
        return self.db.query(func.max(Invoice.sequence)).scalar()

    def find_outstanding(self) -> List[Invoice]:
        return self.db.query(Invoice).filter(Invoice.status.in_(OUTSTANDING_INVOICE_STATUSES)).all()

    def find_paid_since(self, since: datetime) -> List[Invoice]:
        return (
            self.db.query(Invoice)
            .filter(Invoice.status == InvoiceStatus.PAID.value, Invoice.paid_date >= since)
            .all()
        )

    def find_recently_paid(self, limit: int) -> List[Invoice]:
        return (
            self.db.query(Invoice)
            .options(joinedload(Invoice.client))
            .filter(Invoice.status == InvoiceStatus.PAID.value)
            .order_by(Invoice.paid_date.is_(None), Invoice.paid_date.desc(), Invoice.id.desc())
            .limit(limit)
            .all()
        )
