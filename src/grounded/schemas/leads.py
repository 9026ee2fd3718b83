"""
Lead API request and response schemas
"""
from typing import Optional

from pydantic import field_validator

from grounded.models.lead import LeadStatus
from grounded.schemas.base import BaseSchema, BaseResponseSchema, NonEmptyStr


class LeadCreate(BaseSchema):
    """Public contact form submission"""
    name: NonEmptyStr
    email: NonEmptyStr
    phone: Optional[str] = None
    service: Optional[str] = None
    message: NonEmptyStr

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        if "@" not in v:
            raise ValueError("must be an email address")
        return v


class LeadStatusUpdate(BaseSchema):
    status: LeadStatus


class LeadConvert(BaseSchema):
    """Address details the contact form never collects"""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    address: NonEmptyStr
    city: NonEmptyStr
    state: NonEmptyStr
    zip_code: NonEmptyStr
    phone: Optional[str] = None
    notes: Optional[str] = None


class LeadResponse(BaseResponseSchema):
    name: str
    email: str
    phone: Optional[str] = None
    service: Optional[str] = None
    message: str
    status: LeadStatus
