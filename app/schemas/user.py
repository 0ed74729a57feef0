from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator

from app.constants.auth import (
    PASSWORD_INCORRECT_MESSAGE,
    PASSWORD_TOO_SHORT_MESSAGE,
    USERNAME_NOT_FOUND_MESSAGE,
    USERNAME_TAKEN_MESSAGE,
    USERNAME_TOO_SHORT_MESSAGE,
)


class FieldErrorKind(str, Enum):
    username_too_short = "username-too-short"
    password_too_short = "password-too-short"
    username_taken = "username-taken"
    username_not_found = "username-not-found"
    password_incorrect = "password-incorrect"


class FieldError(BaseModel):
    """One validation or conflict failure tied to a named input field."""

    model_config = ConfigDict(frozen=True)

    field: str
    message: str
    kind: FieldErrorKind

    @classmethod
    def username_too_short(cls) -> "FieldError":
        return cls(field="username", message=USERNAME_TOO_SHORT_MESSAGE, kind=FieldErrorKind.username_too_short)

    @classmethod
    def password_too_short(cls) -> "FieldError":
        return cls(field="password", message=PASSWORD_TOO_SHORT_MESSAGE, kind=FieldErrorKind.password_too_short)

    @classmethod
    def username_taken(cls) -> "FieldError":
        return cls(field="username", message=USERNAME_TAKEN_MESSAGE, kind=FieldErrorKind.username_taken)

    @classmethod
    def username_not_found(cls) -> "FieldError":
        return cls(field="username", message=USERNAME_NOT_FOUND_MESSAGE, kind=FieldErrorKind.username_not_found)

    @classmethod
    def password_incorrect(cls) -> "FieldError":
        return cls(field="password", message=PASSWORD_INCORRECT_MESSAGE, kind=FieldErrorKind.password_incorrect)


class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserResponse(BaseModel):
    """
    Outcome of register and login.

    Exactly one side is populated: a non-empty ``errors`` list, or ``user``.
    """

    errors: list[FieldError] | None = None
    user: UserRead | None = None

    @model_validator(mode="after")
    def check_errors_xor_user(self) -> "UserResponse":
        has_errors = bool(self.errors)
        if has_errors == (self.user is not None):
            raise ValueError("UserResponse must carry either errors or a user, not both or neither")
        if self.errors is not None and not self.errors:
            raise ValueError("errors must be omitted rather than empty")
        return self

    @classmethod
    def failure(cls, error: FieldError) -> "UserResponse":
        return cls(errors=[error])
