"""
User store

Data access for ``User`` records. The auth service depends only on the
``UserStore`` protocol; ``SQLAlchemyUserStore`` is the production
implementation over an ``AsyncSession``.

Uniqueness of ``username`` is enforced by the database. A rejected insert is
reported as ``UsernameTakenError`` regardless of which engine produced it, so
callers never inspect driver error codes.
"""

import logging
from typing import Protocol

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.exceptions import DatabaseError, UsernameTakenError
from app.models.user import User

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION_SQLSTATE = "23505"
SQLITE_USERNAME_VIOLATION = f"UNIQUE constraint failed: {User.__tablename__}.username"


class UserStore(Protocol):
    async def get_by_id(self, user_id: int) -> User | None: ...

    async def get_by_username(self, username: str) -> User | None: ...

    async def create(self, username: str, hashed_password: str) -> User:
        """Insert a user; raise ``UsernameTakenError`` if the name exists."""
        ...


def is_unique_violation(error: IntegrityError) -> bool:
    """Tell a uniqueness violation apart from other integrity failures."""
    orig = error.orig
    for candidate in (orig, getattr(orig, "__cause__", None)):
        if candidate is None:
            continue
        code = getattr(candidate, "sqlstate", None) or getattr(candidate, "pgcode", None)
        if code == UNIQUE_VIOLATION_SQLSTATE:
            return True
    return SQLITE_USERNAME_VIOLATION in str(orig)


class SQLAlchemyUserStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, user_id: int) -> User | None:
        return await self.db.get(User, user_id)

    async def get_by_username(self, username: str) -> User | None:
        result = await self.db.execute(select(User).where(User.username == username))
        return result.scalars().first()

    async def create(self, username: str, hashed_password: str) -> User:
        user = User(username=username, hashed_password=hashed_password)
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            if is_unique_violation(e):
                logger.info(f"Rejected duplicate username '{username}'")
                raise UsernameTakenError(username) from e
            logger.error(f"Integrity error while creating user: {e.orig}")
            raise DatabaseError("Failed to create user", operation="create_user") from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Database error while creating user: {e}")
            raise DatabaseError("Failed to create user", operation="create_user") from e

        await self.db.refresh(user)
        return user
