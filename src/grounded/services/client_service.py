"""
Client service
"""
from typing import Any, Dict, List

from grounded.models import Client
from grounded.repositories.client_repository import ClientRepository
from grounded.schemas.clients import ClientCreate, ClientUpdate
from grounded.services.base_service import BaseService
from grounded.utils.logging import get_logger

logger = get_logger(__name__)


class ClientService(BaseService[ClientRepository]):
    """Create, list and fully update clients"""

    repository_class = ClientRepository
    entity_name = "Client"

    def list_clients(self) -> List[Dict[str, Any]]:
        """Clients newest first, each with job and invoice counts"""
        return [
            {"client": client, "job_count": job_count, "invoice_count": invoice_count}
            for client, job_count, invoice_count in self.repository.list_with_counts()
        ]

    def create_client(self, data: ClientCreate) -> Client:
        client = self.repository.create(**data.model_dump())
        logger.info(f"[green]Client created:[/green] [cyan]{client.display_name}[/cyan] (id={client.id})")
        return client

    def update_client(self, client_id: int, data: ClientUpdate) -> Client:
        client = self.get(client_id)
        return self.repository.update(client, **data.model_dump())
