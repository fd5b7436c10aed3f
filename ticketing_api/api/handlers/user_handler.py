"""
User Handler

Registration, login, token refresh, profile and password reset.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model
          ↘ Utils  ↗

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Wrap results in the response envelope

Domain errors raised by services (DuplicateResourceError,
AuthenticationError...) are rendered by the global exception handlers.
"""

from fastapi import APIRouter, Depends, status

from ticketing_api.api.dependencies import CurrentUser
from ticketing_api.api.dependencies.services import get_user_service
from ticketing_api.shared.schemas.common import ApiResponse, MessageResponse
from ticketing_api.shared.schemas.user import (
    AuthResponse,
    ForgotPasswordRequest,
    RefreshTokenRequest,
    ResetPasswordRequest,
    TokenResponse,
    UserCreate,
    UserLogin,
    UserResponse,
    UserUpdate,
)
from ticketing_api.shared.services.user_service import UserService


router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[UserResponse],
    status_code=status.HTTP_201_CREATED,
)
async def register(
    user_data: UserCreate,
    user_service: UserService = Depends(get_user_service),
):
    """
    Register a new buyer account.

    Raises:
        409: If email already registered
    """
    return ApiResponse(data=await user_service.register(user_data))


@router.post("/login", response_model=ApiResponse[AuthResponse])
async def login(
    credentials: UserLogin,
    user_service: UserService = Depends(get_user_service),
):
    """
    Authenticate user and return an access/refresh token pair.

    Raises:
        401: If credentials are invalid
    """
    return ApiResponse(data=await user_service.login(credentials))


@router.post("/refresh", response_model=ApiResponse[TokenResponse])
async def refresh_token(
    body: RefreshTokenRequest,
    user_service: UserService = Depends(get_user_service),
):
    return ApiResponse(data=await user_service.refresh(body.refresh_token))


@router.get("", response_model=ApiResponse[UserResponse])
async def get_profile(
    current_user: CurrentUser,
    user_service: UserService = Depends(get_user_service),
):
    return ApiResponse(data=await user_service.get_profile(current_user["user_id"]))


@router.put("", response_model=ApiResponse[UserResponse])
async def update_profile(
    changes: UserUpdate,
    current_user: CurrentUser,
    user_service: UserService = Depends(get_user_service),
):
    return ApiResponse(data=await user_service.update_profile(current_user["user_id"], changes))


@router.post("/forgot-password", response_model=ApiResponse[MessageResponse])
async def forgot_password(
    body: ForgotPasswordRequest,
    user_service: UserService = Depends(get_user_service),
):
    """Always answers the same way, whether or not the email is registered."""
    await user_service.request_password_reset(body.email)
    return ApiResponse(data=MessageResponse(message="If the email is registered, a reset link has been sent"))


@router.post("/reset-password", response_model=ApiResponse[MessageResponse])
async def reset_password(
    body: ResetPasswordRequest,
    user_service: UserService = Depends(get_user_service),
):
    await user_service.reset_password(body.token, body.new_password)
    return ApiResponse(data=MessageResponse(message="Password has been reset"))
