"""
Client model
"""
from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship

from grounded.models.base import BaseModel


class Client(BaseModel):
    """A customer of the business. Owns jobs and invoices."""
    __tablename__ = "clients"

    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=True, index=True)
    phone = Column(String(50), nullable=False)

    address = Column(String(255), nullable=False)
    city = Column(String(100), nullable=False)
    state = Column(String(50), nullable=False)
    zip_code = Column(String(20), nullable=False)

    notes = Column(Text, nullable=True)

    jobs = relationship("Job", back_populates="client")
    invoices = relationship("Invoice", back_populates="client")

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
