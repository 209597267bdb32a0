"""User endpoints: registration, login and the caller's own profile."""

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from remarkbook.api.deps import get_auth_service, get_current_user, get_user_service
from remarkbook.models.user import User
from remarkbook.schemas.user import (
    AuthMessageResult,
    AuthResult,
    LoginRequest,
    ProfileMessageResult,
    ProfileResult,
    UserRegister,
    UserUpdate,
)
from remarkbook.services.auth import AuthService
from remarkbook.services.user import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "/register",
    response_model=AuthResult,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
    responses={400: {"description": "Invalid data or email already registered"}},
)
async def register(
    data: UserRegister,
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthResult:
    """Create an account and return its public profile with a 30-day token."""
    return AuthResult(data=await auth_service.register(data))


@router.post(
    "/login",
    response_model=AuthResult,
    summary="User login",
    responses={
        400: {"description": "Email or password missing"},
        401: {"description": "Invalid email or password"},
    },
)
async def login(
    data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthResult:
    return AuthResult(data=await auth_service.login(data.email, data.password))


@router.get("/profile", response_model=ProfileResult, summary="Get own profile")
async def get_profile(
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> ProfileResult:
    return ProfileResult(data=await user_service.get_profile(current_user))


@router.put(
    "/profile",
    response_model=AuthResult,
    summary="Update own profile",
    description="Update name, email and/or password. A fresh token is returned.",
)
async def update_profile(
    changes: UserUpdate,
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> AuthResult:
    return AuthResult(data=await user_service.update_profile(current_user, changes))


@router.put(
    "/profile/image",
    response_model=AuthMessageResult,
    summary="Upload profile image",
    description="""
    Multipart upload in the `profileImage` field. Optional form fields
    `firstName`, `lastName`, `email` and `password` are applied as well.

    - Images only (`image/*`)
    - Maximum size: `PROFILE_IMAGE_MAX_SIZE_MB` (default 5MB)
    """,
    responses={400: {"description": "Missing file, not an image, or too large"}},
)
async def update_profile_image(
    profile_image: UploadFile | None = File(None, alias="profileImage"),
    first_name: str | None = Form(None, alias="firstName"),
    last_name: str | None = Form(None, alias="lastName"),
    email: str | None = Form(None),
    password: str | None = Form(None),
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> AuthMessageResult:
    try:
        changes = UserUpdate(
            first_name=first_name, last_name=last_name, email=email, password=password
        )
    except ValidationError as e:
        raise RequestValidationError(e.errors())

    try:
        data = await user_service.update_profile_image(current_user, profile_image, changes)
    finally:
        if profile_image is not None:
            await profile_image.close()

    return AuthMessageResult(data=data, message="Profile updated successfully")


@router.delete(
    "/profile/image",
    response_model=ProfileMessageResult,
    summary="Remove profile image",
)
async def delete_profile_image(
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> ProfileMessageResult:
    return ProfileMessageResult(
        data=await user_service.delete_profile_image(current_user),
        message="Profile image deleted successfully",
    )
