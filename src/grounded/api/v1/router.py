"""
Main API router for v1 endpoints
"""
from fastapi import APIRouter

from grounded.api.v1.endpoints import (
    auth,
    catalog,
    clients,
    dashboard,
    employees,
    invoices,
    jobs,
    leads,
    plants,
    routes,
)

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(clients.router, tags=["clients"])
api_router.include_router(jobs.router, tags=["jobs"])
api_router.include_router(invoices.router, tags=["invoices"])
api_router.include_router(employees.router, tags=["employees"])
api_router.include_router(leads.router, tags=["leads"])
api_router.include_router(plants.router, tags=["plants"])
api_router.include_router(catalog.router, tags=["catalog"])
api_router.include_router(dashboard.router, tags=["dashboard"])
api_router.include_router(routes.router, tags=["routes"])
