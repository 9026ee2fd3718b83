"""
Job service and job status lifecycle
"""
from typing import List

from grounded.models import Job, Client, User
from grounded.models.job import JobStatus, JOB_TRANSITIONS
from grounded.repositories.job_repository import JobRepository
from grounded.schemas.jobs import JobCreate, JobUpdate
from grounded.services.base_service import BaseService
from grounded.utils.exceptions import NotFoundError, ValidationError
from grounded.utils.logging import get_logger

logger = get_logger(__name__)


def initial_job_status(scheduled_date) -> JobStatus:
    """A job created with a date starts scheduled, otherwise pending"""
    return JobStatus.SCHEDULED if scheduled_date else JobStatus.PENDING


def check_job_transition(current: str, target: JobStatus) -> None:
    """
    Raise ValidationError unless ``current -> target`` is allowed.

    pending -> scheduled -> in_progress -> completed, and cancelled from any
    state that is not terminal. Re-applying the current status is a no-op.
    """
    current_status = JobStatus(current)
    if current_status == target:
        return
    if target not in JOB_TRANSITIONS[current_status]:
        raise ValidationError(f"Cannot change job status from '{current_status.value}' to '{target.value}'")


class JobService(BaseService[JobRepository]):

    repository_class = JobRepository
    entity_name = "Job"

    def list_jobs(self) -> List[Job]:
        return self.repository.list_all()

    def _check_references(self, data: JobCreate) -> None:
        if self.db.get(Client, data.client_id) is None:
            raise NotFoundError(f"Client {data.client_id} not found")
        if data.assigned_to_id is not None and self.db.get(User, data.assigned_to_id) is None:
            raise NotFoundError(f"Employee {data.assigned_to_id} not found")

    def create_job(self, data: JobCreate) -> Job:
        self._check_references(data)

        fields = data.model_dump()
        fields["service_type"] = data.service_type.value
        fields["priority"] = data.priority.value
        fields["status"] = initial_job_status(data.scheduled_date).value

        job = self.repository.create(**fields)
        logger.info(f"[green]Job created:[/green] [cyan]{job.title}[/cyan] (id={job.id}, status={job.status})")
        return job

    def update_job(self, job_id: int, data: JobUpdate) -> Job:
        """Replace the editable fields. The status is left untouched."""
        job = self.get(job_id)
        self._check_references(data)

        fields = data.model_dump()
        fields["service_type"] = data.service_type.value
        fields["priority"] = data.priority.value
        return self.repository.update(job, **fields)

    def change_status(self, job_id: int, status: JobStatus) -> Job:
        job = self.get(job_id)
        check_job_transition(job.status, status)
        previous = job.status
        job = self.repository.update(job, status=status.value)
        logger.info(f"[cyan]Job {job.id} status:[/cyan] {previous} -> {job.status}")
        return job
