"""
Todo Auth API - Access Guard

Pure request gate: given the ``Authorization`` header value and a token
service, either returns the verified claims or raises an AuthError.
"""

from typing import Optional

from fastapi.security.utils import get_authorization_scheme_param

from todo_api.auth.models import TokenClaims
from todo_api.auth.tokens import TokenService
from todo_api.errors import MissingTokenError


def extract_bearer_token(authorization: Optional[str]) -> str:
    """Return the token from ``Bearer <token>`` or raise MissingTokenError."""
    scheme, token = get_authorization_scheme_param(authorization)
    if not authorization or scheme.lower() != "bearer" or not token:
        raise MissingTokenError()
    return token.strip()


def authenticate(authorization: Optional[str], token_service: TokenService) -> TokenClaims:
    """Run the guard for one request.

    Missing header or another scheme raises MissingTokenError (401); a bad or
    expired token raises InvalidTokenError / TokenExpiredError (403).
    """
    token = extract_bearer_token(authorization)
    return token_service.verify(token)
