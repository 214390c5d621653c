import asyncio
from abc import ABC, abstractmethod
from typing import Optional

from todo_api.auth.models import User
from todo_api.errors import ValidationError


class UserRepositoryInterface(ABC):
    """Abstract interface for user repository.

    This interface allows swapping the process-local store for another backend.
    """

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user."""
        pass

    @abstractmethod
    async def create_if_absent(self, user: User) -> Optional[User]:
        """Create a new user unless the username exists. Returns None if it does."""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        pass

    @abstractmethod
    async def exists_by_username(self, username: str) -> bool:
        """Check if username exists."""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass


class InMemoryUserRepository(UserRepositoryInterface):
    """
    Process-local credential store.

    Users are kept in registration order and lost on restart. Usernames are
    case-sensitive and not unique under ``create``: duplicates are stored and
    lookups return the first match.
    """

    def __init__(self):
        self._users: list[User] = []
        self._lock = asyncio.Lock()

    @staticmethod
    def _validate(user: User) -> None:
        if not user.username or not user.password_hash:
            raise ValidationError("Username and password are required")

    def _find(self, username: str) -> Optional[User]:
        return next((u for u in self._users if u.username == username), None)

    async def create(self, user: User) -> User:
        self._validate(user)
        async with self._lock:
            self._users.append(user)
        return user

    async def create_if_absent(self, user: User) -> Optional[User]:
        self._validate(user)
        # Check and append under one lock so concurrent registrations cannot both pass
        async with self._lock:
            if self._find(user.username) is not None:
                return None
            self._users.append(user)
        return user

    async def get_by_username(self, username: str) -> Optional[User]:
        return self._find(username)

    async def exists_by_username(self, username: str) -> bool:
        return self._find(username) is not None

    async def count(self) -> int:
        return len(self._users)

    def clear(self) -> None:
        """Drop all users (test helper)."""
        self._users.clear()
