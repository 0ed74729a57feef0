"""
Mock utilities for testing the auth service without a database

Provides:
- An in-memory user store with per-method call counters
- A session mapping that records every write
"""

from app.exceptions import DatabaseError, UsernameTakenError
from app.models.user import User


class InMemoryUserStore:
    """User store keeping records in a dict, enforcing unique usernames"""

    def __init__(self):
        self.users: dict[int, User] = {}
        self.next_id = 1
        self.calls = {"get_by_id": 0, "get_by_username": 0, "create": 0}

    @property
    def call_count(self) -> int:
        return sum(self.calls.values())

    async def get_by_id(self, user_id: int) -> User | None:
        self.calls["get_by_id"] += 1
        return self.users.get(user_id)

    async def get_by_username(self, username: str) -> User | None:
        self.calls["get_by_username"] += 1
        for user in self.users.values():
            if user.username == username:
                return user
        return None

    async def create(self, username: str, hashed_password: str) -> User:
        self.calls["create"] += 1
        if any(u.username == username for u in self.users.values()):
            raise UsernameTakenError(username)
        user = User(id=self.next_id, username=username, hashed_password=hashed_password)
        self.users[user.id] = user
        self.next_id += 1
        return user

    def rows_for(self, username: str) -> list[User]:
        return [u for u in self.users.values() if u.username == username]

    def delete(self, user_id: int) -> None:
        """Simulate an out-of-band deletion"""
        self.users.pop(user_id, None)


class FailingUserStore(InMemoryUserStore):
    """User store whose writes fail with an infrastructure error"""

    async def create(self, username: str, hashed_password: str) -> User:
        self.calls["create"] += 1
        raise DatabaseError("connection refused", operation="create_user")


class RecordingSession(dict):
    """Session mapping that counts writes"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.writes = 0

    def __setitem__(self, key, value):
        self.writes += 1
        super().__setitem__(key, value)
