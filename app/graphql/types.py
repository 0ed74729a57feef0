"""Strawberry GraphQL types for users and auth results."""

from datetime import datetime

import strawberry

from app.schemas.user import FieldError, UserResponse


@strawberry.type(name="User")
class UserType:
    """A registered user. The password hash is never exposed."""

    id: int
    username: str
    created_at: datetime | None
    updated_at: datetime | None


@strawberry.type(name="FieldError")
class FieldErrorType:
    """A validation or conflict failure on one input field."""

    field: str
    message: str


@strawberry.type(name="UserResponse")
class UserResponseType:
    """Either a list of field errors or the affected user."""

    errors: list[FieldErrorType] | None = None
    user: UserType | None = None


# ============================================================================
# Input types
# ============================================================================


@strawberry.input
class UsernamePasswordInput:
    username: str
    password: str


# ============================================================================
# Helper conversion functions
# ============================================================================


def user_to_type(user) -> UserType:
    return UserType(
        id=user.id,
        username=user.username,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def field_error_to_type(error: FieldError) -> FieldErrorType:
    return FieldErrorType(field=error.field, message=error.message)


def user_response_to_type(response: UserResponse) -> UserResponseType:
    if response.errors:
        return UserResponseType(errors=[field_error_to_type(e) for e in response.errors])
    return UserResponseType(user=user_to_type(response.user))
