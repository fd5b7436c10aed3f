"""
User Schemas

Request/response models for user and authentication endpoints.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from ticketing_api.shared.models.enums import UserRole, UserStatus
from ticketing_api.shared.schemas.common import BaseSchema


class UserBase(BaseModel):
    """Base user schema."""

    email: EmailStr


class UserCreate(UserBase):
    """Schema for user registration."""

    name: str = Field(min_length=1, max_length=100)
    password: str = Field(
        min_length=8,
        description="Password (minimum 8 characters)",
    )


class UserLogin(UserBase):
    """Schema for user login."""

    password: str = Field(min_length=1)


class UserUpdate(BaseModel):
    """Profile update. Omitted fields are left unchanged."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=8)


class RefreshTokenRequest(BaseModel):
    refresh_token: str


class ForgotPasswordRequest(UserBase):
    """Ask for a password-reset token to be emailed."""


class ResetPasswordRequest(BaseModel):
    token: str
    new_password: str = Field(min_length=8)


class UserResponse(BaseSchema):
    """Schema for user response."""

    id: UUID
    name: str
    email: str
    role: UserRole
    status: UserStatus
    created_at: datetime


class TokenResponse(BaseModel):
    """Access/refresh token pair."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds


class AuthResponse(TokenResponse):
    """Login result: the user plus a fresh token pair."""

    user: UserResponse
