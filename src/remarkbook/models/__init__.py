"""Database models."""
from remarkbook.models.user import User
from remarkbook.models.remark import Remark, RemarkPriority

__all__ = ["User", "Remark", "RemarkPriority"]
