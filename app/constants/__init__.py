"""Constants package."""

from .auth import (
    PASSWORD_INCORRECT_MESSAGE,
    PASSWORD_LENGTH_FLOOR,
    PASSWORD_TOO_SHORT_MESSAGE,
    SESSION_USER_ID_KEY,
    USERNAME_LENGTH_FLOOR,
    USERNAME_NOT_FOUND_MESSAGE,
    USERNAME_TAKEN_MESSAGE,
    USERNAME_TOO_SHORT_MESSAGE,
)

__all__ = [
    "USERNAME_LENGTH_FLOOR",
    "PASSWORD_LENGTH_FLOOR",
    "USERNAME_TOO_SHORT_MESSAGE",
    "PASSWORD_TOO_SHORT_MESSAGE",
    "USERNAME_TAKEN_MESSAGE",
    "USERNAME_NOT_FOUND_MESSAGE",
    "PASSWORD_INCORRECT_MESSAGE",
    "SESSION_USER_ID_KEY",
]
