"""
Session login / logout endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from grounded.api.v1.dependencies import SESSION_USER_KEY, get_current_user
from grounded.core.dependencies import get_db
from grounded.models import User
from grounded.schemas.employees import EmployeeResponse, LoginRequest
from grounded.services.employee_service import EmployeeService
from grounded.utils.exceptions import AuthorizationError, PersistenceError
from grounded.utils.logging import get_logger

logger = get_logger(__name__)
router = APIRouter()


@router.post("/auth/login", response_model=EmployeeResponse)
async def login(credentials: LoginRequest, request: Request, db: Session = Depends(get_db)):
    """Check email and password and start a session"""
    try:
        user = EmployeeService(db).authenticate(credentials.email, credentials.password)
        if user is None:
            raise AuthorizationError("Invalid email or password")

        request.session.clear()
        request.session[SESSION_USER_KEY] = user.id
        logger.info(f"[green]User logged in:[/green] [cyan]{user.email}[/cyan]")
        return EmployeeResponse.model_validate(user)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error during login:[/red] {e}")
        raise PersistenceError("Failed to log in")


@router.post("/auth/logout")
async def logout(request: Request):
    request.session.clear()
    return {"success": True}


@router.get("/auth/me", response_model=EmployeeResponse)
async def current_user(user: User = Depends(get_current_user)):
    return EmployeeResponse.model_validate(user)
