"""User model for authentication and remark ownership."""
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from remarkbook.models.base import BaseModel


class User(BaseModel):
    """A registered account. Only the password hash is stored."""

    __tablename__ = "users"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    profile_image: Mapped[str | None] = mapped_column(String(500), nullable=True, default=None)
    profile_image_public_id: Mapped[str | None] = mapped_column(
        String(255), nullable=True, default=None
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
