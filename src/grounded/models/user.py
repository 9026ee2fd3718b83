"""
Employee / dashboard user model
"""
import enum

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from grounded.models.base import BaseModel


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    EMPLOYEE = "employee"


class User(BaseModel):
    """An employee who can log in to the dashboard and be assigned jobs."""
    __tablename__ = "users"

    name = Column(String(200), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default=UserRole.EMPLOYEE.value)
    phone = Column(String(50), nullable=True)

    assigned_jobs = relationship("Job", back_populates="assigned_to")
