import bcrypt

from todo_api.config import settings
from todo_api.errors import ValidationError

# bcrypt only looks at the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """One-way bcrypt hashing with a tunable work factor."""

    def __init__(self, rounds: int | None = None):
        self.rounds = rounds if rounds is not None else settings.BCRYPT_ROUNDS

    def hash(self, password: str) -> str:
        """Hash a password using bcrypt."""
        password_bytes = password.encode("utf-8")
        if len(password_bytes) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password_bytes, salt).decode("utf-8")

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash. A malformed hash never verifies."""
        password_bytes = plain_password.encode("utf-8")
        hashed_bytes = hashed_password.encode("utf-8")
        if len(password_bytes) > MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(password_bytes, hashed_bytes)
        except ValueError:
            return False
