"""
Todo Auth API - Authentication Schemas

Pydantic models for authentication requests and responses.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class UserRegisterRequest(BaseModel):
    """Request schema for user registration."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserLoginRequest(BaseModel):
    """Request schema for user login. Missing fields fail as bad credentials."""

    username: str = ""
    password: str = ""


class TokenResponse(BaseModel):
    """Response schema for successful authentication."""

    token: str
    token_type: str = "bearer"


class ClaimsResponse(BaseModel):
    """Verified claims of the presented token."""

    username: str
    issued_at: datetime
    expires_at: datetime


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str
