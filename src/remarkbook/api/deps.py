"""FastAPI dependency injection for authentication, database and services."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from remarkbook.core.exceptions import AuthenticationError
from remarkbook.core.security import get_user_id_from_token
from remarkbook.db.session import get_db
from remarkbook.models.user import User
from remarkbook.repositories.remark import RemarkRepository
from remarkbook.repositories.user import UserRepository
from remarkbook.services.auth import AuthService
from remarkbook.services.remark import RemarkService
from remarkbook.services.uploads import ProfileImageStorage
from remarkbook.services.user import UserService

# Missing headers are answered by get_current_user with 401, not by HTTPBearer.
security = HTTPBearer(auto_error=False)


async def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


async def get_remark_repository(db: AsyncSession = Depends(get_db)) -> RemarkRepository:
    return RemarkRepository(db)


def get_image_storage() -> ProfileImageStorage:
    return ProfileImageStorage()


async def get_auth_service(
    user_repo: UserRepository = Depends(get_user_repository),
) -> AuthService:
    return AuthService(user_repo)


async def get_user_service(
    user_repo: UserRepository = Depends(get_user_repository),
    image_storage: ProfileImageStorage = Depends(get_image_storage),
) -> UserService:
    return UserService(user_repo, image_storage)


async def get_remark_service(
    remark_repo: RemarkRepository = Depends(get_remark_repository),
) -> RemarkService:
    return RemarkService(remark_repo)


async def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    user_repo: UserRepository = Depends(get_user_repository),
) -> User:
    """
    Resolve the bearer token to a user and record its ID on ``request.state.user_id``.

    Raises:
        AuthenticationError: If the header is missing or malformed, the token
            is invalid or expired, or the user no longer exists
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("AUTH_001")

    try:
        user_id = get_user_id_from_token(credentials.credentials)
    except (JWTError, ValueError):
        raise AuthenticationError("AUTH_002")

    user = await user_repo.get_by_id(user_id)
    if user is None:
        raise AuthenticationError("AUTH_002")

    # Plain string: the ORM instance is expired by any later rollback.
    request.state.user_id = str(user.id)
    return user
