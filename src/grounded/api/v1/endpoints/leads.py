"""
Leads API endpoints
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from grounded.api.v1.dependencies import get_current_user
from grounded.core.dependencies import get_db
from grounded.schemas.clients import ClientResponse
from grounded.schemas.leads import LeadConvert, LeadCreate, LeadResponse, LeadStatusUpdate
from grounded.services.lead_service import LeadService
from grounded.utils.exceptions import PersistenceError
from grounded.utils.logging import get_logger

logger = get_logger(__name__)
router = APIRouter()
protected = [Depends(get_current_user)]


@router.post("/contact", response_model=LeadResponse, status_code=status.HTTP_201_CREATED)
async def submit_contact_form(payload: LeadCreate, db: Session = Depends(get_db)):
    """
    Public contact form. Every submission is stored as a new lead.
    """
    try:
        lead = LeadService(db).create_lead(payload)
        return LeadResponse.model_validate(lead)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error saving contact form:[/red] {e}")
        raise PersistenceError("Failed to submit contact form")


@router.get("/leads", response_model=List[LeadResponse], dependencies=protected)
async def get_leads(db: Session = Depends(get_db)):
    try:
        return [LeadResponse.model_validate(lead) for lead in LeadService(db).list_leads()]
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error fetching leads:[/red] {e}")
        raise PersistenceError("Failed to fetch leads")


@router.patch("/leads/{lead_id}", response_model=LeadResponse, dependencies=protected)
async def update_lead_status(lead_id: int, payload: LeadStatusUpdate, db: Session = Depends(get_db)):
    """
    Move a lead to a new status (new -> contacted -> converted | closed).
    """
    try:
        lead = LeadService(db).update_status(lead_id, payload.status)
        return LeadResponse.model_validate(lead)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error updating lead {lead_id}:[/red] {e}")
        raise PersistenceError("Failed to update lead")


@router.delete("/leads/{lead_id}", dependencies=protected)
async def delete_lead(lead_id: int, db: Session = Depends(get_db)):
    try:
        LeadService(db).delete_lead(lead_id)
        return {"success": True}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error deleting lead {lead_id}:[/red] {e}")
        raise PersistenceError("Failed to delete lead")


@router.post(
    "/leads/{lead_id}/convert",
    response_model=ClientResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=protected,
)
async def convert_lead(lead_id: int, payload: LeadConvert, db: Session = Depends(get_db)):
    """
    Turn a lead into a client. The client is created and the lead marked
    converted together, or not at all.
    """
    try:
        client = LeadService(db).convert_to_client(lead_id, payload)
        return ClientResponse.model_validate(client)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error converting lead {lead_id}:[/red] {e}")
        raise PersistenceError("Failed to convert lead")
