"""
Invoice service: totals, numbering, status and payments
"""
from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal
from typing import List, Optional, Sequence

from sqlalchemy.exc import IntegrityError

from grounded.core.config import settings
from grounded.models import Client, Invoice, Job, LineItem
from grounded.models.invoice import InvoiceStatus, INVOICE_TRANSITIONS, MAX_AMOUNT
from grounded.repositories.invoice_repository import InvoiceRepository
from grounded.schemas.invoices import InvoiceCreate, LineItemInput
from grounded.services.base_service import BaseService
from grounded.utils.exceptions import NotFoundError, PersistenceError, ValidationError
from grounded.utils.helpers import to_money, utcnow
from grounded.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class InvoiceTotals:
    lines: List[dict]
    subtotal: Decimal
    tax: Decimal
    total: Decimal


def compute_invoice_totals(line_items: Sequence[LineItemInput], tax: Optional[Decimal] = None) -> InvoiceTotals:
    """
    Price the submitted rows.

    Each line total is quantity x unit price, the subtotal is their sum and
    the total is subtotal + tax (tax defaults to 0).
    """
    lines = []
    for position, item in enumerate(line_items):
        unit_price = to_money(item.unit_price)
        lines.append({
            "position": position,
            "description": item.description,
            "quantity": item.quantity,
            "unit_price": unit_price,
            "total": to_money(item.quantity * unit_price),
        })

    subtotal = sum((line["total"] for line in lines), Decimal("0.00"))
    tax_amount = to_money(tax or 0)
    return InvoiceTotals(lines=lines, subtotal=subtotal, tax=tax_amount, total=subtotal + tax_amount)


def format_invoice_number(sequence: int) -> str:
    return f"{settings.invoices.prefix}{sequence}"


class InvoiceService(BaseService[InvoiceRepository]):

    repository_class = InvoiceRepository
    entity_name = "Invoice"

    def list_invoices(self) -> List[Invoice]:
        return self.repository.list_all()

    def next_sequence(self) -> int:
        """Current highest number + 1, or the configured starting number"""
        current = self.repository.max_sequence()
        if current is None:
            return settings.invoices.starting_number
        return current + 1

    def create_invoice(self, data: InvoiceCreate, created_by_id: Optional[int] = None) -> Invoice:
        """
        Validate, price and persist an invoice with its line items.

        The invoice and its rows are committed together. Numbers come from a
        unique column: when a concurrent request takes the same number the
        transaction is rolled back and a fresh number is read, up to
        ``invoices.number_retries`` attempts.
        """
        if not data.client_id or not data.line_items:
            raise ValidationError("Client and at least one line item are required")
        if data.tax is not None and data.tax < 0:
            raise ValidationError("Tax cannot be negative")

        if self.db.get(Client, data.client_id) is None:
            raise NotFoundError(f"Client {data.client_id} not found")
        if data.job_id is not None and self.db.get(Job, data.job_id) is None:
            raise NotFoundError(f"Job {data.job_id} not found")

        totals = compute_invoice_totals(data.line_items, data.tax)
        if totals.total > MAX_AMOUNT:
            raise ValidationError("Invoice total is larger than the maximum allowed amount")
        issue_date = utcnow()
        due_date = data.due_date or (issue_date.date() + timedelta(days=settings.invoices.payment_terms_days))

        attempts = max(1, settings.invoices.number_retries)
        for attempt in range(1, attempts + 1):
            sequence = self.next_sequence()
            invoice = Invoice(
                sequence=sequence,
                invoice_number=format_invoice_number(sequence),
                status=InvoiceStatus.DRAFT.value,
                client_id=data.client_id,
                job_id=data.job_id,
                created_by_id=created_by_id,
                subtotal=totals.subtotal,
                tax=totals.tax,
                total=totals.total,
                amount_paid=Decimal("0.00"),
                issue_date=issue_date,
                due_date=due_date,
                notes=data.notes or None,
                line_items=[LineItem(**line) for line in totals.lines],
            )
            self.repository.add(invoice)
            try:
                self.db.commit()
            except IntegrityError:
                self.db.rollback()
                logger.warning(
                    f"[yellow]Invoice number {invoice.invoice_number} already taken[/yellow] "
                    f"[dim](attempt {attempt}/{attempts})[/dim]"
                )
                continue

            logger.info(
                f"[green]Invoice created:[/green] [cyan]{invoice.invoice_number}[/cyan] "
                f"client={invoice.client_id} total={invoice.total}"
            )
            return self.get(invoice.id)

        raise PersistenceError("Failed to allocate an invoice number")

    def change_status(self, invoice_id: int, status: InvoiceStatus) -> Invoice:
        invoice = self.get(invoice_id)
        current = InvoiceStatus(invoice.status)
        if current == status:
            return invoice
        if status not in INVOICE_TRANSITIONS[current]:
            raise ValidationError(f"Cannot change invoice status from '{current.value}' to '{status.value}'")

        invoice.status = status.value
        if status == InvoiceStatus.PAID:
            invoice.amount_paid = invoice.total
            invoice.paid_date = utcnow()
        logger.info(f"[cyan]Invoice {invoice.invoice_number} status:[/cyan] {current.value} -> {status.value}")
        return self.save(invoice)

    def record_payment(self, invoice_id: int, amount: Decimal) -> Invoice:
        """Add a payment; an invoice whose balance reaches zero becomes paid"""
        invoice = self.get(invoice_id)
        if invoice.status not in (InvoiceStatus.SENT.value, InvoiceStatus.OVERDUE.value):
            raise ValidationError(f"Cannot record a payment on a {invoice.status} invoice")

        amount = to_money(amount)
        if amount > invoice.balance_due:
            raise ValidationError("Payment exceeds the balance due")

        invoice.amount_paid = invoice.amount_paid + amount
        if invoice.amount_paid >= invoice.total:
            invoice.status = InvoiceStatus.PAID.value
            invoice.paid_date = utcnow()
        logger.info(f"[green]Payment of {amount} recorded on {invoice.invoice_number}[/green]")
        return self.save(invoice)
