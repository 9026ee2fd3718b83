"""
Employee / user data access
"""
from typing import List, Optional

from sqlalchemy import func

from grounded.models import User
from grounded.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(func.lower(User.email) == email.strip().lower()).first()

    def list_all(self) -> List[User]:
        return self.db.query(User).order_by(User.name.asc(), User.id.asc()).all()
