"""
Job model and its status state machine
"""
import enum

from sqlalchemy import Column, String, Text, Date, Numeric, Integer, ForeignKey
from sqlalchemy.orm import relationship

from grounded.models.base import BaseModel


class ServiceType(str, enum.Enum):
    DEMO = "demo"
    PLANT_INSTALLATION = "plant_installation"
    MULCH = "mulch"
    GENERAL_INSTALL = "general_install"


SERVICE_TYPE_LABELS = {
    ServiceType.DEMO.value: "Demo & Removal",
    ServiceType.PLANT_INSTALLATION.value: "Plant Installation",
    ServiceType.MULCH.value: "Mulch & Pine Straw",
    ServiceType.GENERAL_INSTALL.value: "Basic Installation",
}


class JobPriority(str, enum.Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


class JobStatus(str, enum.Enum):
    PENDING = "pending"
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


JOB_TRANSITIONS = {
    JobStatus.PENDING: {JobStatus.SCHEDULED, JobStatus.CANCELLED},
    JobStatus.SCHEDULED: {JobStatus.IN_PROGRESS, JobStatus.CANCELLED},
    JobStatus.IN_PROGRESS: {JobStatus.COMPLETED, JobStatus.CANCELLED},
    JobStatus.COMPLETED: set(),
    JobStatus.CANCELLED: set(),
}

ACTIVE_JOB_STATUSES = (JobStatus.PENDING.value, JobStatus.SCHEDULED.value, JobStatus.IN_PROGRESS.value)


def service_type_label(service_type: str) -> str:
    return SERVICE_TYPE_LABELS.get(service_type, service_type)


class Job(BaseModel):
    """A unit of work for a client, optionally scheduled and assigned."""
    __tablename__ = "jobs"

    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    service_type = Column(String(50), nullable=False, index=True)
    priority = Column(String(20), nullable=False, default=JobPriority.NORMAL.value)
    status = Column(String(20), nullable=False, default=JobStatus.PENDING.value, index=True)

    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    assigned_to_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)

    scheduled_date = Column(Date, nullable=True, index=True)
    scheduled_time = Column(String(5), nullable=True)  # "HH:MM"

    job_address = Column(String(255), nullable=False)
    job_city = Column(String(100), nullable=False)
    job_state = Column(String(50), nullable=False)
    job_zip_code = Column(String(20), nullable=False)

    estimated_hours = Column(Numeric(6, 2), nullable=True)
    estimated_cost = Column(Numeric(10, 2), nullable=True)

    client = relationship("Client", back_populates="jobs")
    assigned_to = relationship("User", back_populates="assigned_jobs")
    invoices = relationship("Invoice", back_populates="job")

    @property
    def full_address(self) -> str:
        return f"{self.job_address}, {self.job_city}, {self.job_state} {self.job_zip_code}"

    @property
    def client_name(self):
        return self.client.display_name if self.client else None

    @property
    def assigned_to_name(self):
        return self.assigned_to.name if self.assigned_to else None
