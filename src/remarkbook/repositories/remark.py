"""Remark repository with user-scoped queries."""
from datetime import datetime
from uuid import UUID

from sqlalchemy import case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from remarkbook.models.remark import Remark
from remarkbook.repositories.base import BaseRepository


class RemarkRepository(BaseRepository[Remark]):
    """Repository for Remark model. Every list query is scoped to one owner."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Remark)

    async def get_all_by_user(self, user_id: UUID) -> list[Remark]:
        """All remarks of a user, newest business date first."""
        result = await self.db.execute(
            select(Remark).where(Remark.user_id == user_id).order_by(Remark.date.desc())
        )
        return list(result.scalars().all())

    async def get_by_date_range(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[Remark]:
        """Remarks dated within [start, end], most recently created first."""
        result = await self.db.execute(
            select(Remark)
            .where(
                Remark.user_id == user_id,
                Remark.date >= start,
                Remark.date <= end,
            )
            .order_by(Remark.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_by_status(self, user_id: UUID, done: bool) -> list[Remark]:
        result = await self.db.execute(
            select(Remark)
            .where(Remark.user_id == user_id, Remark.done == done)
            .order_by(Remark.date.desc())
        )
        return list(result.scalars().all())

    async def get_by_priority(self, user_id: UUID, priority: str) -> list[Remark]:
        result = await self.db.execute(
            select(Remark)
            .where(Remark.user_id == user_id, Remark.priority == priority)
            .order_by(Remark.date.desc())
        )
        return list(result.scalars().all())

    async def get_financial_summary(self, user_id: UUID) -> dict:
        """Sum amounts and count done / not-done remarks for a user.

        Returns zeros when the user has no remarks.
        """
        query = select(
            func.coalesce(func.sum(Remark.total_amount), 0).label("total_amount"),
            func.coalesce(func.sum(Remark.advance_amount), 0).label("total_advance"),
            func.coalesce(func.sum(Remark.pending_amount), 0).label("total_pending"),
            func.coalesce(func.sum(case((Remark.done.is_(True), 1), else_=0)), 0).label(
                "completed_remarks"
            ),
            func.coalesce(func.sum(case((Remark.done.is_(False), 1), else_=0)), 0).label(
                "pending_remarks"
            ),
        ).where(Remark.user_id == user_id)

        row = (await self.db.execute(query)).one()
        return {
            "total_amount": float(row.total_amount or 0),
            "total_advance": float(row.total_advance or 0),
            "total_pending": float(row.total_pending or 0),
            "completed_remarks": int(row.completed_remarks or 0),
            "pending_remarks": int(row.pending_remarks or 0),
        }
