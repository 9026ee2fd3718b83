"""
Base service class for common service functionality
"""
from sqlalchemy.orm import Session
from typing import Generic, TypeVar, Type

from grounded.repositories.base_repository import BaseRepository
from grounded.utils.exceptions import NotFoundError

RepositoryType = TypeVar("RepositoryType", bound=BaseRepository)


class BaseService(Generic[RepositoryType]):
    """
    Base service class.
    Services own a repository and turn missing records into NotFoundError.
    """

    repository_class: Type[RepositoryType]
    entity_name: str = "Record"

    def __init__(self, db: Session):
        self.db = db
        self.repository = self.repository_class(db)

    def get(self, id: int):
        """Get a single record by ID or raise NotFoundError"""
        db_obj = self.repository.find_by_id(id)
        if db_obj is None:
            raise NotFoundError(f"{self.entity_name} {id} not found")
        return db_obj

    def save(self, db_obj):
        """Commit pending changes and reload the record"""
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj
