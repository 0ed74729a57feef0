"""
Registration, login and session lookup.

Each operation takes the user store and the caller's session explicitly.
Bad input and credential conflicts come back as ``FieldError`` data inside a
``UserResponse``; store and hashing faults propagate to the caller.
"""

import logging

from app.auth import hash_password_async, verify_password_async
from app.constants.auth import PASSWORD_LENGTH_FLOOR, USERNAME_LENGTH_FLOOR
from app.exceptions import UsernameTakenError
from app.models.user import User
from app.schemas.user import FieldError, UserRead, UserResponse
from app.services.user_store import UserStore
from app.session import SessionSink

logger = logging.getLogger(__name__)


def validate_credentials(username: str, password: str) -> list[FieldError]:
    """Return the first length violation for a registration attempt, if any."""
    if len(username) <= USERNAME_LENGTH_FLOOR:
        return [FieldError.username_too_short()]
    if len(password) <= PASSWORD_LENGTH_FLOOR:
        return [FieldError.password_too_short()]
    return []


async def register(store: UserStore, session: SessionSink, username: str, password: str) -> UserResponse:
    errors = validate_credentials(username, password)
    if errors:
        logger.info(f"Registration rejected: {errors[0].kind.value}")
        return UserResponse(errors=errors)

    hashed_password = await hash_password_async(password)

    try:
        user = await store.create(username, hashed_password)
    except UsernameTakenError:
        logger.info(f"Registration rejected: username '{username}' already taken")
        return UserResponse.failure(FieldError.username_taken())

    # Authenticates every later request carrying this session cookie
    session.user_id = user.id
    logger.info(f"Registered user {user.id}")

    return UserResponse(user=UserRead.model_validate(user))


async def login(
    store: UserStore,
    session: SessionSink,
    username: str,
    password: str,
    *,
    set_session: bool = True,
) -> UserResponse:
    user = await store.get_by_username(username)
    if not user:
        logger.info("Login rejected: unknown username")
        return UserResponse.failure(FieldError.username_not_found())

    valid = await verify_password_async(password, user.hashed_password)
    if not valid:
        logger.warning(f"Login rejected: incorrect password for user {user.id}")
        return UserResponse.failure(FieldError.password_incorrect())

    if set_session:
        session.user_id = user.id
    logger.info(f"User {user.id} logged in")

    return UserResponse(user=UserRead.model_validate(user))


async def me(store: UserStore, session: SessionSink) -> User | None:
    # you are not logged in
    user_id = session.user_id
    if user_id is None:
        return None

    user = await store.get_by_id(user_id)
    if user is None:
        logger.warning(f"Session refers to missing user {user_id}")
    return user
