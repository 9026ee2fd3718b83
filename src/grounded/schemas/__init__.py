"""
Pydantic schemas for request/response validation
"""
from grounded.schemas.base import (
    BaseSchema,
    TimestampSchema,
    IDSchema,
    BaseResponseSchema,
)
from grounded.schemas.clients import ClientCreate, ClientUpdate, ClientResponse, ClientListItem
from grounded.schemas.jobs import JobCreate, JobUpdate, JobStatusUpdate, JobResponse
from grounded.schemas.invoices import (
    LineItemInput,
    InvoiceCreate,
    InvoiceStatusUpdate,
    PaymentCreate,
    LineItemResponse,
    InvoiceResponse,
)
from grounded.schemas.employees import EmployeeCreate, EmployeeResponse, LoginRequest
from grounded.schemas.leads import LeadCreate, LeadStatusUpdate, LeadConvert, LeadResponse
from grounded.schemas.plants import PlantCreate, PlantResponse, PlantListResponse, CatalogImportResult
from grounded.schemas.dashboard import DashboardSnapshot
from grounded.schemas.routes import RouteStop, RouteSummary, RouteResponse

__all__ = [
    # Base schemas
    "BaseSchema",
    "TimestampSchema",
    "IDSchema",
    "BaseResponseSchema",
    # Clients
    "ClientCreate",
    "ClientUpdate",
    "ClientResponse",
    "ClientListItem",
    # Jobs
    "JobCreate",
    "JobUpdate",
    "JobStatusUpdate",
    "JobResponse",
    # Invoices
    "LineItemInput",
    "InvoiceCreate",
    "InvoiceStatusUpdate",
    "PaymentCreate",
    "LineItemResponse",
    "InvoiceResponse",
    # Employees
    "EmployeeCreate",
    "EmployeeResponse",
    "LoginRequest",
    # Leads
    "LeadCreate",
    "LeadStatusUpdate",
    "LeadConvert",
    "LeadResponse",
    # Plants
    "PlantCreate",
    "PlantResponse",
    "PlantListResponse",
    "CatalogImportResult",
    # Dashboard / routing
    "DashboardSnapshot",
    "RouteStop",
    "RouteSummary",
    "RouteResponse",
]
