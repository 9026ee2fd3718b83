"""
Employees API endpoints
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from grounded.api.v1.dependencies import get_current_user
from grounded.core.dependencies import get_db
from grounded.schemas.employees import EmployeeCreate, EmployeeResponse
from grounded.services.employee_service import EmployeeService
from grounded.utils.exceptions import PersistenceError
from grounded.utils.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("/employees", response_model=List[EmployeeResponse])
async def get_employees(db: Session = Depends(get_db)):
    try:
        return [EmployeeResponse.model_validate(user) for user in EmployeeService(db).list_employees()]
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error fetching employees:[/red] {e}")
        raise PersistenceError("Failed to fetch employees")


@router.post("/employees", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(payload: EmployeeCreate, db: Session = Depends(get_db)):
    """Create a dashboard account; the employee logs in with this email and password"""
    try:
        user = EmployeeService(db).create_employee(payload)
        return EmployeeResponse.model_validate(user)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error creating employee:[/red] {e}")
        raise PersistenceError("Failed to create employee")
