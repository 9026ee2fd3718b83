"""
Lead (contact form submission) model
"""
import enum

from sqlalchemy import Column, String, Text

from grounded.models.base import BaseModel


class LeadStatus(str, enum.Enum):
    NEW = "new"
    CONTACTED = "contacted"
    CONVERTED = "converted"
    CLOSED = "closed"


LEAD_TRANSITIONS = {
    LeadStatus.NEW: {LeadStatus.CONTACTED},
    LeadStatus.CONTACTED: {LeadStatus.CONVERTED, LeadStatus.CLOSED},
    LeadStatus.CONVERTED: set(),
    LeadStatus.CLOSED: set(),
}

CONVERTIBLE_LEAD_STATUSES = {LeadStatus.NEW, LeadStatus.CONTACTED}


class Lead(BaseModel):
    """
    A prospective customer from the public contact form.
    Not linked to any client until converted.
    """
    __tablename__ = "leads"

    name = Column(String(200), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    phone = Column(String(50), nullable=True)
    service = Column(String(100), nullable=True)
    message = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default=LeadStatus.NEW.value, index=True)
