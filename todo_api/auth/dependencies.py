import logging
from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from todo_api.auth.guard import authenticate
from todo_api.auth.models import TokenClaims
from todo_api.auth.service import AuthService
from todo_api.auth.tokens import TokenService
from todo_api.errors import AuthError
from todo_api.state import AppState, get_app_state

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme - auto_error=False to handle missing tokens ourselves.
# Also publishes the bearer security scheme in the OpenAPI description.
bearer_scheme = HTTPBearer(auto_error=False)


def get_token_service(
    state: Annotated[AppState, Depends(get_app_state)]
) -> TokenService:
    return state.tokens


def get_auth_service(
    state: Annotated[AppState, Depends(get_app_state)]
) -> AuthService:
    """Dependency to get AuthService bound to the application's stores."""
    return AuthService(state.users, state.hasher, state.tokens)


async def get_current_claims(
    request: Request,
    _credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> TokenClaims:
    try:
        claims = authenticate(request.headers.get("Authorization"), token_service)
    except AuthError as exc:
        logger.warning(f"Rejected {request.method} {request.url.path}: {exc.message}")
        raise

    request.state.claims = claims
    return claims


# Type alias for cleaner dependency injection
CurrentClaims = Annotated[TokenClaims, Depends(get_current_claims)]
