import asyncio
import logging
from typing import Optional

from todo_api.auth.hashing import PasswordHasher
from todo_api.auth.models import User
from todo_api.auth.repository import UserRepositoryInterface
from todo_api.auth.tokens import TokenService
from todo_api.config import settings
from todo_api.errors import AuthFailure, UsernameTakenError, ValidationError

logger = logging.getLogger(__name__)


class AuthService:
    """Registration and login on top of the credential store, hasher and token service."""

    def __init__(
        self,
        repository: UserRepositoryInterface,
        hasher: PasswordHasher,
        tokens: TokenService,
        enforce_unique_usernames: Optional[bool] = None,
    ):
        self.repository = repository
        self.hasher = hasher
        self.tokens = tokens
        if enforce_unique_usernames is None:
            enforce_unique_usernames = settings.ENFORCE_UNIQUE_USERNAMES
        self.enforce_unique_usernames = enforce_unique_usernames

    @staticmethod
    def _reject_taken(username: str) -> None:
        logger.info(f"Registration rejected, username taken: username={username}")
        raise UsernameTakenError()

    async def register_user(self, username: str, password: str) -> User:
        """Register a new user.

        Raises ValidationError for empty fields and UsernameTakenError when
        uniqueness is enforced and the username is already registered.
        """
        if not username or not password:
            raise ValidationError("Username and password are required")

        # Early exit before paying for a hash; create_if_absent below is authoritative
        if self.enforce_unique_usernames and await self.repository.exists_by_username(username):
            self._reject_taken(username)

        # bcrypt is CPU bound; keep it off the event loop
        password_hash = await asyncio.to_thread(self.hasher.hash, password)
        user = User.create(username=username, password_hash=password_hash)
        if self.enforce_unique_usernames:
            if await self.repository.create_if_absent(user) is None:
                self._reject_taken(username)
        else:
            await self.repository.create(user)
        logger.info(f"Registered user: username={user.username}, id={user.id}")
        return user

    async def authenticate_user(self, username: str, password: str) -> User:
        """Authenticate user by username and password.

        Unknown users fail without computing a hash, so the two failure cases
        differ in timing but never in the response.
        """
        user = await self.repository.get_by_username(username) if username else None
        if user is None or not password:
            logger.info(f"Login failed: username={username!r}")
            raise AuthFailure()
        if not await asyncio.to_thread(self.hasher.verify, password, user.password_hash):
            logger.info(f"Login failed: username={username!r}")
            raise AuthFailure()
        return user

    async def login(self, username: str, password: str) -> str:
        """Verify credentials and issue an access token."""
        user = await self.authenticate_user(username, password)
        token = self.tokens.issue(user.username)
        logger.info(f"Issued access token: username={user.username}")
        return token
