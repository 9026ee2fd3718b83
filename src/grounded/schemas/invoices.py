"""
Invoice API request and response schemas
"""
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from pydantic import Field, field_validator

from grounded.models.invoice import InvoiceStatus, MAX_AMOUNT, MAX_QUANTITY
from grounded.schemas.base import BaseSchema, BaseResponseSchema, NonEmptyStr


class LineItemInput(BaseSchema):
    """
    One submitted invoice row.

    Numeric input is lenient: an unusable quantity becomes 1 and an unusable
    or negative unit price becomes 0 instead of rejecting the invoice.
    Values too large to store are still rejected.
    """
    description: NonEmptyStr
    quantity: int = Field(1, le=MAX_QUANTITY)
    unit_price: Decimal = Field(Decimal("0"), le=MAX_AMOUNT)

    @field_validator("quantity", mode="before")
    @classmethod
    def coerce_quantity(cls, v):
        try:
            quantity = Decimal(str(v))
        except (InvalidOperation, TypeError, ValueError):
            return 1
        if not quantity.is_finite() or quantity < 1:
            return 1
        return int(quantity)

    @field_validator("unit_price", mode="before")
    @classmethod
    def coerce_unit_price(cls, v):
        try:
            price = Decimal(str(v))
        except (InvalidOperation, TypeError, ValueError):
            return Decimal("0")
        if not price.is_finite() or price < 0:
            return Decimal("0")
        return price


class InvoiceCreate(BaseSchema):
    client_id: Optional[int] = None
    job_id: Optional[int] = None
    line_items: List[LineItemInput] = []
    tax: Optional[Decimal] = Field(None, le=MAX_AMOUNT)
    notes: Optional[str] = None
    due_date: Optional[date] = None

    @field_validator("job_id", "tax", "notes", "due_date", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class InvoiceStatusUpdate(BaseSchema):
    status: InvoiceStatus


class PaymentCreate(BaseSchema):
    amount: Decimal = Field(gt=0, le=MAX_AMOUNT)


class LineItemResponse(BaseSchema):
    id: int
    description: str
    quantity: int
    unit_price: float
    total: float


class InvoiceResponse(BaseResponseSchema):
    invoice_number: str
    status: InvoiceStatus
    client_id: int
    client_name: Optional[str] = None
    job_id: Optional[int] = None
    job_title: Optional[str] = None
    subtotal: float
    tax: float
    total: float
    amount_paid: float
    balance_due: float
    issue_date: datetime
    due_date: date
    paid_date: Optional[datetime] = None
    notes: Optional[str] = None
    line_items: List[LineItemResponse] = []
