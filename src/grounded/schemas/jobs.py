"""
Job API request and response schemas
"""
import re
from datetime import date
from typing import Optional

from pydantic import Field, field_validator

from grounded.models.job import JobStatus, JobPriority, ServiceType
from grounded.schemas.base import BaseSchema, BaseResponseSchema, NonEmptyStr

TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class JobBase(BaseSchema):
    """Editable job fields"""
    title: NonEmptyStr
    description: Optional[str] = None
    service_type: ServiceType
    priority: JobPriority = JobPriority.NORMAL
    client_id: int
    assigned_to_id: Optional[int] = None
    scheduled_date: Optional[date] = None
    scheduled_time: Optional[str] = None
    job_address: NonEmptyStr
    job_city: NonEmptyStr
    job_state: NonEmptyStr
    job_zip_code: NonEmptyStr
    estimated_hours: Optional[float] = Field(None, ge=0)
    estimated_cost: Optional[float] = Field(None, ge=0)

    @field_validator("description", "scheduled_date", "scheduled_time", "assigned_to_id", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("priority", mode="before")
    @classmethod
    def default_priority(cls, v):
        return v or JobPriority.NORMAL

    @field_validator("scheduled_time")
    @classmethod
    def check_time(cls, v):
        if v is not None and not TIME_PATTERN.match(v):
            raise ValueError("must be a 24-hour time formatted HH:MM")
        return v


class JobCreate(JobBase):
    pass


class JobUpdate(JobBase):
    """Full-record update. Status is changed separately."""
    pass


class JobStatusUpdate(BaseSchema):
    status: JobStatus


class JobResponse(JobBase, BaseResponseSchema):
    status: JobStatus
    client_name: Optional[str] = None
    assigned_to_name: Optional[str] = None
