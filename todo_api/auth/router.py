"""
Todo Auth API - Authentication Router

Endpoints for user registration, login, and the current token's claims.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from todo_api.auth.dependencies import CurrentClaims, get_auth_service
from todo_api.auth.schemas import (
    UserRegisterRequest,
    UserLoginRequest,
    TokenResponse,
    ClaimsResponse,
    MessageResponse,
)
from todo_api.auth.service import AuthService


router = APIRouter(tags=["Authentication"])


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def register(
    request: UserRegisterRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> MessageResponse:
    """
    Register a new user with username and password.

    Both fields are required and must be non-empty.
    """
    await auth_service.register_user(
        username=request.username,
        password=request.password,
    )
    return MessageResponse(message="User registered successfully")


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login and get access token",
)
async def login(
    request: UserLoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> TokenResponse:
    """
    Authenticate user and return a JWT access token valid for one hour.

    Use the returned token in the Authorization header:
    `Authorization: Bearer <token>`
    """
    token = await auth_service.login(
        username=request.username,
        password=request.password,
    )
    return TokenResponse(token=token)


@router.get(
    "/me",
    response_model=ClaimsResponse,
    summary="Get current token claims",
)
async def get_me(claims: CurrentClaims) -> ClaimsResponse:
    """Requires a valid JWT token in the Authorization header."""
    return ClaimsResponse(
        username=claims.username,
        issued_at=claims.issued_at,
        expires_at=claims.expires_at,
    )
