"""Profile service: read and update the caller's own profile and image."""

import logging

from fastapi import UploadFile

from remarkbook.core.exceptions import ConflictError, NotFoundError
from remarkbook.core.security import hash_password
from remarkbook.models.user import User
from remarkbook.repositories.user import UserRepository
from remarkbook.schemas.user import AuthenticatedUser, UserResponse, UserUpdate
from remarkbook.services.auth import authenticated_view
from remarkbook.services.uploads import ProfileImageStorage

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, user_repo: UserRepository, image_storage: ProfileImageStorage):
        self.user_repo = user_repo
        self.image_storage = image_storage

    async def _load(self, user: User) -> User:
        db_user = await self.user_repo.get_by_id(user.id)
        if db_user is None:
            raise NotFoundError("USER_003")
        return db_user

    async def _check_email_available(self, user: User, changes: UserUpdate) -> None:
        """Reject an email owned by another account. Runs before anything is modified."""
        if changes.email and changes.email != user.email:
            if await self.user_repo.email_exists(changes.email):
                raise ConflictError("USER_002")

    def _apply_changes(self, user: User, changes: UserUpdate) -> None:
        """Apply profile fields. Blank or missing values leave the stored value alone."""
        if changes.first_name:
            user.first_name = changes.first_name
        if changes.last_name:
            user.last_name = changes.last_name
        if changes.email:
            user.email = changes.email
        if changes.password:
            user.password_hash = hash_password(changes.password)

    async def get_profile(self, user: User) -> UserResponse:
        return UserResponse.model_validate(await self._load(user))

    async def update_profile(self, user: User, changes: UserUpdate) -> AuthenticatedUser:
        """Update names, email and/or password and issue a fresh token."""
        db_user = await self._load(user)
        await self._check_email_available(db_user, changes)
        self._apply_changes(db_user, changes)
        updated = await self.user_repo.save(db_user)
        return authenticated_view(updated)

    async def update_profile_image(
        self, user: User, upload: UploadFile | None, changes: UserUpdate
    ) -> AuthenticatedUser:
        """Store a new profile image, apply optional profile fields, drop the old image.

        Profile changes are validated before the file is written. The new file
        is removed again if saving the profile fails. The previous file is
        removed only after the new one is committed, and a failure to remove
        it does not fail the request.
        """
        db_user = await self._load(user)
        await self._check_email_available(db_user, changes)
        previous_public_id = db_user.profile_image_public_id

        stored = await self.image_storage.save(db_user.id, upload)
        try:
            db_user.profile_image = stored.url
            db_user.profile_image_public_id = stored.public_id
            self._apply_changes(db_user, changes)
            updated = await self.user_repo.save(db_user)
        except Exception:
            await self.user_repo.rollback()
            await self.image_storage.delete(stored.public_id)
            raise

        if previous_public_id and previous_public_id != stored.public_id:
            await self.image_storage.delete(previous_public_id)

        logger.info("Profile image updated", extra={"user_id": str(updated.id)})
        return authenticated_view(updated)

    async def delete_profile_image(self, user: User) -> UserResponse:
        """Remove the profile image file (best-effort) and clear both image fields."""
        db_user = await self._load(user)
        if db_user.profile_image or db_user.profile_image_public_id:
            await self.image_storage.delete(db_user.profile_image_public_id)
            db_user.profile_image = None
            db_user.profile_image_public_id = None
            db_user = await self.user_repo.save(db_user)
        return UserResponse.model_validate(db_user)
