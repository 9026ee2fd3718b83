"""
Employee and authentication schemas
"""
from typing import Optional

from pydantic import Field, field_validator

from grounded.models.user import UserRole
from grounded.schemas.base import BaseSchema, BaseResponseSchema, NonEmptyStr


class EmployeeCreate(BaseSchema):
    name: NonEmptyStr
    email: NonEmptyStr
    password: str = Field(min_length=8)
    role: UserRole = UserRole.EMPLOYEE
    phone: Optional[str] = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        if "@" not in v:
            raise ValueError("must be an email address")
        return v.lower()


class EmployeeResponse(BaseResponseSchema):
    """Never carries the password hash"""
    name: str
    email: str
    role: UserRole
    phone: Optional[str] = None


class LoginRequest(BaseSchema):
    email: NonEmptyStr
    password: NonEmptyStr
