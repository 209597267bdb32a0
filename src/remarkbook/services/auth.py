"""Authentication service: registration and login."""

import logging

from remarkbook.core.exceptions import AuthenticationError, BadRequestError, ConflictError
from remarkbook.core.security import create_access_token, hash_password, pwd_context, verify_password
from remarkbook.models.user import User
from remarkbook.repositories.user import UserRepository
from remarkbook.schemas.user import AuthenticatedUser, UserRegister

logger = logging.getLogger(__name__)


def authenticated_view(user: User) -> AuthenticatedUser:
    """Public profile of ``user`` with a newly issued token."""
    return AuthenticatedUser.model_validate(
        {
            "id": user.id,
            "first_name": user.first_name,
            "last_name": user.last_name,
            "email": user.email,
            "profile_image": user.profile_image,
            "profile_image_public_id": user.profile_image_public_id,
            "created_at": user.created_at,
            "updated_at": user.updated_at,
            "token": create_access_token(user.id),
        }
    )


class AuthService:
    """Service for authentication operations."""

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def register(self, data: UserRegister) -> AuthenticatedUser:
        """
        Register a new user.

        Args:
            data: Validated registration payload (email already lowercased)

        Returns:
            Public profile with an access token

        Raises:
            ConflictError: If the email is already registered
        """
        if await self.user_repo.email_exists(data.email):
            raise ConflictError("USER_001")

        user = User(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            password_hash=hash_password(data.password),
        )
        created_user = await self.user_repo.create(user)
        logger.info("User registered", extra={"user_id": str(created_user.id)})
        return authenticated_view(created_user)

    async def login(self, email: str | None, password: str | None) -> AuthenticatedUser:
        """
        Authenticate a user by email and password.

        Unknown emails and wrong passwords fail identically.

        Raises:
            BadRequestError: If email or password is missing
            AuthenticationError: If the credentials don't match
        """
        if not email or not password:
            raise BadRequestError("AUTH_004")

        user = await self.user_repo.get_by_email(email)
        if user is None:
            # Keep the response time close to a real verification.
            pwd_context.dummy_verify()
            raise AuthenticationError("AUTH_003")

        if not verify_password(password, user.password_hash):
            raise AuthenticationError("AUTH_003")

        return authenticated_view(user)
