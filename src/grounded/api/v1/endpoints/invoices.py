"""
Invoices API endpoints
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from grounded.api.v1.dependencies import get_current_user
from grounded.core.dependencies import get_db
from grounded.models import User
from grounded.schemas.invoices import InvoiceCreate, InvoiceResponse, InvoiceStatusUpdate, PaymentCreate
from grounded.services.invoice_service import InvoiceService
from grounded.utils.exceptions import PersistenceError
from grounded.utils.logging import get_logger

logger = get_logger(__name__)
router = APIRouter()


@router.get("/invoices", response_model=List[InvoiceResponse])
async def get_invoices(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    try:
        return [InvoiceResponse.model_validate(invoice) for invoice in InvoiceService(db).list_invoices()]
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error fetching invoices:[/red] {e}")
        raise PersistenceError("Failed to fetch invoices")


@router.post("/invoices", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
async def create_invoice(
    payload: InvoiceCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """
    Create an invoice from its line items.

    Line totals, subtotal and total are computed here; the invoice number is
    the next in sequence (INV-1001 for the first invoice).
    """
    try:
        invoice = InvoiceService(db).create_invoice(payload, created_by_id=user.id)
        return InvoiceResponse.model_validate(invoice)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error creating invoice:[/red] {e}")
        raise PersistenceError("Failed to create invoice")


@router.get("/invoices/{invoice_id}", response_model=InvoiceResponse)
async def get_invoice(invoice_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    try:
        return InvoiceResponse.model_validate(InvoiceService(db).get(invoice_id))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error fetching invoice {invoice_id}:[/red] {e}")
        raise PersistenceError("Failed to fetch invoice")


@router.patch("/invoices/{invoice_id}/status", response_model=InvoiceResponse)
async def update_invoice_status(
    invoice_id: int,
    payload: InvoiceStatusUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    try:
        invoice = InvoiceService(db).change_status(invoice_id, payload.status)
        return InvoiceResponse.model_validate(invoice)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error updating invoice {invoice_id} status:[/red] {e}")
        raise PersistenceError("Failed to update invoice")


@router.post("/invoices/{invoice_id}/payments", response_model=InvoiceResponse)
async def record_payment(
    invoice_id: int,
    payload: PaymentCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    try:
        invoice = InvoiceService(db).record_payment(invoice_id, payload.amount)
        return InvoiceResponse.model_validate(invoice)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error recording payment on invoice {invoice_id}:[/red] {e}")
        raise PersistenceError("Failed to record payment")
