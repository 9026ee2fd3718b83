"""
Base schema classes
"""
from pydantic import BaseModel as PydanticBaseModel, StringConstraints
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing_extensions import Annotated

# Required text field: surrounding whitespace stripped, must not be empty
NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class BaseSchema(PydanticBaseModel):
    """
    Base schema with common configuration.
    JSON uses camelCase keys; snake_case is accepted on input as well.
    """

    class Config:
        from_attributes = True  # Allows ORM mode (formerly orm_mode)
        populate_by_name = True
        alias_generator = to_camel


class TimestampSchema(BaseSchema):
    """Schema with timestamp fields"""
    created_at: datetime
    updated_at: datetime


class IDSchema(BaseSchema):
    """Schema with ID field"""
    id: int


class BaseResponseSchema(TimestampSchema, IDSchema):
    """Base response schema with common fields"""
    pass
