"""Remark service: CRUD, filtered listings and the financial summary.

Mutations (update, toggle, delete) share one ownership check: the remark is
loaded by ID regardless of owner, a missing remark is a 404, and a remark that
belongs to someone else is a 403. A foreign remark is never reported as
missing.
"""

import logging
from uuid import UUID

from remarkbook.core.dates import local_day_bounds
from remarkbook.core.exceptions import AccessDeniedError, BadRequestError, NotFoundError
from remarkbook.models.remark import Remark, RemarkPriority
from remarkbook.models.user import User
from remarkbook.repositories.remark import RemarkRepository
from remarkbook.schemas.remark import FinancialSummary, RemarkCreate, RemarkUpdate

logger = logging.getLogger(__name__)

DONE_STATUS = "done"


class RemarkService:
    """Service layer for remark operations. Every method acts for ``user``."""

    def __init__(self, remark_repo: RemarkRepository):
        self.remark_repo = remark_repo

    async def _get_owned(self, user: User, remark_id: UUID, action: str) -> Remark:
        remark = await self.remark_repo.get_by_id(remark_id)
        if remark is None:
            raise NotFoundError("REM_001", details={"remark_id": str(remark_id)})

        if remark.user_id != user.id:
            logger.warning(
                "Remark access denied",
                extra={"user_id": str(user.id), "error_code": "REM_002"},
            )
            raise AccessDeniedError(
                "REM_002",
                details={"remark_id": str(remark_id)},
                message=f"Not authorized to {action} this remark",
            )
        return remark

    async def create(self, user: User, data: RemarkCreate) -> Remark:
        values = data.model_dump()
        values["priority"] = RemarkPriority(values["priority"]).value
        remark = Remark(user_id=user.id, **values)
        remark.recalculate_pending()
        return await self.remark_repo.create(remark)

    async def list_all(self, user: User) -> list[Remark]:
        return await self.remark_repo.get_all_by_user(user.id)

    async def list_by_date(self, user: User, day: str) -> list[Remark]:
        """Remarks whose business date falls on the given local calendar day.

        Raises:
            BadRequestError: If ``day`` cannot be parsed as a date
        """
        try:
            start, end = local_day_bounds(day)
        except ValueError:
            raise BadRequestError("REM_004", details={"date": day})
        return await self.remark_repo.get_by_date_range(user.id, start, end)

    async def list_by_status(self, user: User, status: str) -> list[Remark]:
        """``done`` selects completed remarks; any other token selects open ones."""
        return await self.remark_repo.get_by_status(user.id, status == DONE_STATUS)

    async def list_by_priority(self, user: User, priority: str) -> list[Remark]:
        """
        Raises:
            BadRequestError: If ``priority`` is not low, medium or high
        """
        if priority not in RemarkPriority.values():
            raise BadRequestError("REM_003", details={"priority": priority})
        return await self.remark_repo.get_by_priority(user.id, priority)

    async def update(self, user: User, remark_id: UUID, data: RemarkUpdate) -> Remark:
        remark = await self._get_owned(user, remark_id, "update")
        return await self.remark_repo.update(remark, data.changes())

    async def toggle_done(self, user: User, remark_id: UUID) -> Remark:
        remark = await self._get_owned(user, remark_id, "update")
        remark.done = not remark.done
        return await self.remark_repo.save(remark)

    async def delete(self, user: User, remark_id: UUID) -> None:
        remark = await self._get_owned(user, remark_id, "delete")
        await self.remark_repo.delete(remark)
        logger.info("Remark deleted", extra={"user_id": str(user.id)})

    async def financial_summary(self, user: User) -> FinancialSummary:
        totals = await self.remark_repo.get_financial_summary(user.id)
        return FinancialSummary(**totals)
