"""
Client API request and response schemas
"""
from typing import Optional

from pydantic import field_validator

from grounded.schemas.base import BaseSchema, BaseResponseSchema, NonEmptyStr


class ClientBase(BaseSchema):
    """Fields required to create or fully update a client"""
    first_name: NonEmptyStr
    last_name: NonEmptyStr
    email: Optional[str] = None
    phone: NonEmptyStr
    address: NonEmptyStr
    city: NonEmptyStr
    state: NonEmptyStr
    zip_code: NonEmptyStr
    notes: Optional[str] = None

    @field_validator("email", "notes", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ClientCreate(ClientBase):
    pass


class ClientUpdate(ClientBase):
    pass


class ClientResponse(ClientBase, BaseResponseSchema):
    display_name: str


class ClientListItem(ClientResponse):
    job_count: int = 0
    invoice_count: int = 0
