"""
API-specific dependencies for v1 endpoints
"""
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from grounded.core.dependencies import get_db
from grounded.models import User
from grounded.utils.exceptions import AuthorizationError

SESSION_USER_KEY = "user_id"


def get_current_user(request: Request, db: Session = Depends(get_db)) -> User:
    """
    Resolve the logged-in user from the session cookie.

    Raises:
        AuthorizationError: no session, or the session user no longer exists
    """
    user_id = request.session.get(SESSION_USER_KEY)
    if user_id is None:
        raise AuthorizationError()

    user = db.get(User, user_id)
    if user is None:
        request.session.clear()
        raise AuthorizationError()
    return user
