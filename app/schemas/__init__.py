from .user import FieldError, FieldErrorKind, UserRead, UserResponse

# Define the public API of this module
__all__ = [
    "FieldError",
    "FieldErrorKind",
    "UserRead",
    "UserResponse",
]
