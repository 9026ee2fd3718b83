"""
Invoice and line item models
"""
import enum
from decimal import Decimal

from sqlalchemy import Column, String, Text, Date, DateTime, Numeric, Integer, ForeignKey
from sqlalchemy.orm import relationship

from grounded.models.base import BaseModel
from grounded.utils.helpers import utcnow


class InvoiceStatus(str, enum.Enum):
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


INVOICE_TRANSITIONS = {
    InvoiceStatus.DRAFT: {InvoiceStatus.SENT, InvoiceStatus.CANCELLED},
    InvoiceStatus.SENT: {InvoiceStatus.PAID, InvoiceStatus.OVERDUE, InvoiceStatus.CANCELLED},
    InvoiceStatus.OVERDUE: {InvoiceStatus.PAID, InvoiceStatus.CANCELLED},
    InvoiceStatus.PAID: set(),
    InvoiceStatus.CANCELLED: set(),
}

OUTSTANDING_INVOICE_STATUSES = (InvoiceStatus.SENT.value, InvoiceStatus.OVERDUE.value)

# Largest amount a Numeric(10, 2) column holds
MAX_AMOUNT = Decimal("99999999.99")
MAX_QUANTITY = 1_000_000


class Invoice(BaseModel):
    """
    A bill for a client.

    ``subtotal``, ``tax`` and ``total`` are computed once from the line items
    at creation and persisted; ``amount_paid`` is a running total.
    """
    __tablename__ = "invoices"

    sequence = Column(Integer, unique=True, nullable=False, index=True)
    invoice_number = Column(String(30), unique=True, nullable=False, index=True)
    status = Column(String(20), nullable=False, default=InvoiceStatus.DRAFT.value, index=True)

    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    job_id = Column(Integer, ForeignKey("jobs.id"), nullable=True, index=True)
    created_by_id = Column(Integer, ForeignKey("users.id"), nullable=True)

    subtotal = Column(Numeric(10, 2), nullable=False, default=0)
    tax = Column(Numeric(10, 2), nullable=False, default=0)
    total = Column(Numeric(10, 2), nullable=False, default=0)
    amount_paid = Column(Numeric(10, 2), nullable=False, default=0)

    issue_date = Column(DateTime, nullable=False, default=utcnow)
    due_date = Column(Date, nullable=False)
    paid_date = Column(DateTime, nullable=True, index=True)
    notes = Column(Text, nullable=True)

    client = relationship("Client", back_populates="invoices")
    job = relationship("Job", back_populates="invoices")
    line_items = relationship(
        "LineItem",
        back_populates="invoice",
        cascade="all, delete-orphan",
        order_by="LineItem.position",
    )

    @property
    def balance_due(self):
        return self.total - self.amount_paid

    @property
    def client_name(self):
        return self.client.display_name if self.client else None

    @property
    def job_title(self):
        return self.job.title if self.job else None


class LineItem(BaseModel):
    """One priced row of an invoice. ``total`` is never recomputed."""
    __tablename__ = "line_items"

    invoice_id = Column(Integer, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    description = Column(String(500), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    unit_price = Column(Numeric(10, 2), nullable=False, default=0)
    total = Column(Numeric(10, 2), nullable=False, default=0)

    invoice = relationship("Invoice", back_populates="line_items")
