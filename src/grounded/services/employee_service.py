"""
Employee service: dashboard accounts and credential checks
"""
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from grounded.core.security import hash_password, verify_password
from grounded.models import User
from grounded.repositories.user_repository import UserRepository
from grounded.schemas.employees import EmployeeCreate
from grounded.services.base_service import BaseService
from grounded.utils.exceptions import ValidationError
from grounded.utils.logging import get_logger

logger = get_logger(__name__)


class EmployeeService(BaseService[UserRepository]):

    repository_class = UserRepository
    entity_name = "Employee"

    def list_employees(self) -> List[User]:
        return self.repository.list_all()

    def create_employee(self, data: EmployeeCreate) -> User:
        if self.repository.find_by_email(data.email):
            raise ValidationError("An employee with this email already exists")

        user = User(
            name=data.name,
            email=data.email,
            password_hash=hash_password(data.password),
            role=data.role.value,
            phone=data.phone or None,
        )
        self.repository.add(user)
        try:
            self.save(user)
        except IntegrityError:
            self.db.rollback()
            raise ValidationError("An employee with this email already exists")

        logger.info(f"[green]Employee created:[/green] [cyan]{user.email}[/cyan] role={user.role}")
        return user

    def authenticate(self, email: str, password: str) -> Optional[User]:
        """Return the user for valid credentials, None otherwise"""
        user = self.repository.find_by_email(email)
        if user is None or not verify_password(user.password_hash, password):
            logger.warning(f"[yellow]Failed login attempt for[/yellow] {email}")
            return None
        return user
