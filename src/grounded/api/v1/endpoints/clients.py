"""
Clients API endpoints
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from grounded.api.v1.dependencies import get_current_user
from grounded.core.dependencies import get_db
from grounded.schemas.clients import ClientCreate, ClientListItem, ClientResponse, ClientUpdate
from grounded.services.client_service import ClientService
from grounded.utils.exceptions import PersistenceError
from grounded.utils.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("/clients", response_model=List[ClientListItem])
async def get_clients(db: Session = Depends(get_db)):
    """
    Get all clients, newest first, with their job and invoice counts.
    """
    try:
        rows = ClientService(db).list_clients()
        return [
            ClientListItem.model_validate({
                **ClientResponse.model_validate(row["client"]).model_dump(),
                "job_count": row["job_count"],
                "invoice_count": row["invoice_count"],
            })
            for row in rows
        ]
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error fetching clients:[/red] {e}")
        raise PersistenceError("Failed to fetch clients")


@router.post("/clients", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(payload: ClientCreate, db: Session = Depends(get_db)):
    try:
        client = ClientService(db).create_client(payload)
        return ClientResponse.model_validate(client)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error creating client:[/red] {e}")
        raise PersistenceError("Failed to create client")


@router.get("/clients/{client_id}", response_model=ClientResponse)
async def get_client(client_id: int, db: Session = Depends(get_db)):
    try:
        return ClientResponse.model_validate(ClientService(db).get(client_id))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error fetching client {client_id}:[/red] {e}")
        raise PersistenceError("Failed to fetch client")


@router.put("/clients/{client_id}", response_model=ClientResponse)
async def update_client(client_id: int, payload: ClientUpdate, db: Session = Depends(get_db)):
    try:
        client = ClientService(db).update_client(client_id, payload)
        return ClientResponse.model_validate(client)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error updating client {client_id}:[/red] {e}")
        raise PersistenceError("Failed to update client")
