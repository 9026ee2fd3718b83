"""
Database models module
"""
from grounded.models.base import Base, BaseModel
from grounded.models.client import Client
from grounded.models.user import User, UserRole
from grounded.models.job import Job, JobStatus, JobPriority, ServiceType
from grounded.models.invoice import Invoice, LineItem, InvoiceStatus
from grounded.models.lead import Lead, LeadStatus
from grounded.models.plant import Plant, PLANT_ARRAY_FIELDS

__all__ = [
    "Base",
    "BaseModel",
    "Client",
    "User",
    "UserRole",
    "Job",
    "JobStatus",
    "JobPriority",
    "ServiceType",
    "Invoice",
    "LineItem",
    "InvoiceStatus",
    "Lead",
    "LeadStatus",
    "Plant",
    "PLANT_ARRAY_FIELDS",
]
