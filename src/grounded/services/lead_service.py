"""
Lead service for contact form submissions and their conversion to clients
"""
from typing import List

from grounded.models import Client, Lead
from grounded.models.lead import LeadStatus, LEAD_TRANSITIONS, CONVERTIBLE_LEAD_STATUSES
from grounded.repositories.lead_repository import LeadRepository
from grounded.schemas.leads import LeadCreate, LeadConvert
from grounded.services.base_service import BaseService
from grounded.utils.exceptions import ValidationError
from grounded.utils.logging import get_logger, app_logger

logger = get_logger(__name__)


def split_name(full_name: str):
    """Split a free-text name into (first, last); a single word has no last name"""
    parts = full_name.strip().split(None, 1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1]


class LeadService(BaseService[LeadRepository]):
    """Service for managing leads from the public contact form"""

    repository_class = LeadRepository
    entity_name = "Lead"

    def create_lead(self, data: LeadCreate) -> Lead:
        lead = self.repository.create(
            name=data.name,
            email=data.email,
            phone=data.phone or None,
            service=data.service or None,
            message=data.message,
            status=LeadStatus.NEW.value,
        )
        app_logger.info(f"📬 [bold green]New lead received:[/bold green] [cyan]{lead.name}[/cyan] (id={lead.id})")
        return lead

    def list_leads(self) -> List[Lead]:
        return self.repository.list_all()

    def update_status(self, lead_id: int, status: LeadStatus) -> Lead:
        """
        Move a lead along new -> contacted -> converted | closed.
        Setting the status it already has is a no-op.
        """
        lead = self.get(lead_id)
        current = LeadStatus(lead.status)
        if current == status:
            return lead
        if status not in LEAD_TRANSITIONS[current]:
            raise ValidationError(f"Cannot change lead status from '{current.value}' to '{status.value}'")

        lead = self.repository.update(lead, status=status.value)
        logger.info(f"[cyan]Lead {lead.id} status:[/cyan] {current.value} -> {status.value}")
        return lead

    def delete_lead(self, lead_id: int) -> None:
        lead = self.get(lead_id)
        self.repository.delete(lead)
        logger.info(f"[yellow]Lead {lead_id} deleted[/yellow]")

    def convert_to_client(self, lead_id: int, data: LeadConvert) -> Client:
        """
        Create a client from a lead and mark the lead converted.

        Both writes share one transaction: either the client exists and the
        lead is converted, or neither change is stored.
        """
        lead = self.get(lead_id)
        if LeadStatus(lead.status) not in CONVERTIBLE_LEAD_STATUSES:
            raise ValidationError(f"A {lead.status} lead cannot be converted")

        phone = data.phone or lead.phone
        if not phone:
            raise ValidationError("A phone number is required to create a client")

        first_name, last_name = split_name(lead.name)
        first_name = data.first_name or first_name
        last_name = data.last_name or last_name
        if not first_name or not last_name:
            raise ValidationError("A first and last name are required to create a client")

        client = Client(
            first_name=first_name,
            last_name=last_name,
            email=lead.email,
            phone=phone,
            address=data.address,
            city=data.city,
            state=data.state,
            zip_code=data.zip_code,
            notes=data.notes or lead.message,
        )
        self.db.add(client)
        lead.status = LeadStatus.CONVERTED.value
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(client)

        app_logger.info(
            f"✅ [bold green]Lead {lead.id} converted[/bold green] to client "
            f"[cyan]{client.display_name}[/cyan] (id={client.id})"
        )
        return client
