"""
Custom exception classes

Every error raised towards the client is an HTTPException subclass so that the
application-level handler can render it as ``{"error": detail}``.
"""
from fastapi import HTTPException, status


class ValidationError(HTTPException):
    """Exception raised when a required field is missing or malformed"""
    def __init__(self, detail: str, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(status_code=status_code, detail=detail)


class AuthorizationError(HTTPException):
    """Exception raised when the request carries no valid session"""
    def __init__(self, detail: str = "Unauthorized", status_code: int = status.HTTP_401_UNAUTHORIZED):
        super().__init__(status_code=status_code, detail=detail)


class NotFoundError(HTTPException):
    """Exception raised when a referenced entity does not exist"""
    def __init__(self, detail: str, status_code: int = status.HTTP_404_NOT_FOUND):
        super().__init__(status_code=status_code, detail=detail)


class PersistenceError(HTTPException):
    """Exception raised for database errors. The detail is always generic."""
    def __init__(self, detail: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(status_code=status_code, detail=detail)
