"""
Todo Auth API - Token Service

Issues and verifies stateless HS256 JWT access tokens. Tokens are not stored
server-side and cannot be revoked; they stay valid until ``exp``.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from jose import JWTError, jwt

from todo_api.auth.models import TokenClaims
from todo_api.config import settings
from todo_api.errors import InvalidTokenError, TokenExpiredError


class TokenService:
    """Sign and verify access tokens binding a username."""

    def __init__(
        self,
        secret_key: Optional[str] = None,
        algorithm: Optional[str] = None,
        expires_delta: Optional[timedelta] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize the token service.

        Args:
            secret_key: Symmetric signing secret (defaults to JWT_SECRET_KEY)
            algorithm: JWS algorithm (defaults to JWT_ALGORITHM)
            expires_delta: Token lifetime (defaults to JWT_ACCESS_TOKEN_EXPIRE_MINUTES)
            clock: Optional clock function for testing (returns current datetime)
        """
        self.secret_key = secret_key or settings.JWT_SECRET_KEY
        self.algorithm = algorithm or settings.JWT_ALGORITHM
        if expires_delta is None:
            expires_delta = timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)
        self.expires_delta = expires_delta
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def _now(self) -> datetime:
        return self._clock()

    def issue(self, username: str) -> str:
        """Create a signed access token for ``username``."""
        issued_at = int(self._now().timestamp())
        expires_at = issued_at + int(self.expires_delta.total_seconds())
        to_encode = {
            "sub": username,
            "username": username,
            "iat": issued_at,
            "exp": expires_at,
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Verify signature and expiry and return the embedded claims.

        Raises:
            InvalidTokenError: bad signature or malformed payload
            TokenExpiredError: current time is at or past ``exp``
        """
        try:
            # Expiry is checked below against the injected clock
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except JWTError as exc:
            raise InvalidTokenError() from exc

        username = payload.get("username")
        issued_at = payload.get("iat")
        expires_at = payload.get("exp")
        if not isinstance(username, str) or not username:
            raise InvalidTokenError()
        if not isinstance(issued_at, int) or not isinstance(expires_at, int):
            raise InvalidTokenError()

        if self._now().timestamp() >= expires_at:
            raise TokenExpiredError()

        return TokenClaims(
            username=username,
            issued_at=datetime.fromtimestamp(issued_at, tz=timezone.utc),
            expires_at=datetime.fromtimestamp(expires_at, tz=timezone.utc),
        )
