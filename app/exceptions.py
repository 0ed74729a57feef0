"""
Custom Exception Classes

Infrastructure faults raised by the store adapter and the password hasher.
User input problems are never raised: they travel back to the client as
``FieldError`` data (see ``app.schemas.user``).
"""

from typing import Any

from fastapi import status


class AppError(Exception):
    """Base exception class for all application exceptions"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# Store Exceptions
# ============================================================================


class DuplicateResourceError(AppError):
    """Raised when a uniqueness constraint rejects a new record"""

    def __init__(self, resource_type: str, field: str, value: Any):
        super().__init__(
            message=f"{resource_type} with {field} '{value}' already exists",
            status_code=status.HTTP_409_CONFLICT,
            details={"resource_type": resource_type, "field": field, "value": value},
        )


class UsernameTakenError(DuplicateResourceError):
    """Raised by the user store when the username is already registered"""

    def __init__(self, username: str):
        super().__init__(resource_type="User", field="username", value=username)


class DatabaseError(AppError):
    """Raised when a database operation fails"""

    def __init__(self, message: str = "A database error occurred", operation: str | None = None):
        details = {"operation": operation} if operation else {}
        super().__init__(message=message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, details=details)


# ============================================================================
# Credential Exceptions
# ============================================================================


class PasswordHashingError(AppError):
    """Raised when the hashing backend cannot produce a hash"""

    def __init__(self, message: str = "Password hashing failed"):
        super().__init__(message=message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
