"""
Todo Auth API - Authentication Models

User entity held by the credential store and the verified token claims.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
import uuid


def _utcnow() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


@dataclass
class User:
    """User entity for authentication."""

    id: str
    username: str
    password_hash: str
    created_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def create(cls, username: str, password_hash: str) -> "User":
        """Create a new user with generated ID."""
        return cls(
            id=str(uuid.uuid4()),
            username=username,
            password_hash=password_hash,
            created_at=_utcnow(),
        )


@dataclass(frozen=True)
class TokenClaims:
    """Claims carried by a verified access token."""

    username: str
    issued_at: datetime
    expires_at: datetime
