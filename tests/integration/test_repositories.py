"""Integration tests for repository layer."""
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from remarkbook.models.remark import Remark
from remarkbook.models.user import User
from remarkbook.repositories.remark import RemarkRepository
from remarkbook.repositories.user import UserRepository


def _remark(user: User, **overrides) -> Remark:
    values = {
        "user_id": user.id,
        "date": datetime(2024, 3, 15, 10, 0),
        "content": "Deliver parcel",
        "total_amount": Decimal("100"),
        "advance_amount": Decimal("40"),
    }
    values.update(overrides)
    return Remark(**values)


class TestUserRepository:
    @pytest.mark.asyncio
    async def test_get_by_email_is_case_insensitive(self, db_session: AsyncSession, test_user: User):
        repo = UserRepository(db_session)

        found = await repo.get_by_email("TestUser@Example.com")

        assert found is not None
        assert found.id == test_user.id

    @pytest.mark.asyncio
    async def test_email_exists(self, db_session: AsyncSession, test_user: User):
        repo = UserRepository(db_session)

        assert await repo.email_exists("testuser@example.com") is True
        assert await repo.email_exists("missing@example.com") is False

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, db_session: AsyncSession):
        assert await UserRepository(db_session).get_by_id(uuid4()) is None


class TestRemarkRepository:
    @pytest.mark.asyncio
    async def test_create_derives_pending(self, db_session: AsyncSession, test_user: User):
        repo = RemarkRepository(db_session)

        remark = await repo.create(_remark(test_user, pending_amount=Decimal("999")))

        assert remark.pending_amount == Decimal("60")

    @pytest.mark.asyncio
    async def test_update_derives_pending(self, db_session: AsyncSession, test_user: User):
        repo = RemarkRepository(db_session)
        remark = await repo.create(_remark(test_user))

        updated = await repo.update(remark, {"advance_amount": Decimal("100")})

        assert updated.pending_amount == Decimal("0")

    @pytest.mark.asyncio
    async def test_get_by_id_ignores_owner(
        self, db_session: AsyncSession, test_user: User, other_user: User
    ):
        repo = RemarkRepository(db_session)
        remark = await repo.create(_remark(other_user))

        found = await repo.get_by_id(remark.id)

        assert found is not None
        assert found.user_id == other_user.id

    @pytest.mark.asyncio
    async def test_date_range_ordered_by_creation(self, db_session: AsyncSession, test_user: User):
        repo = RemarkRepository(db_session)
        created = datetime(2024, 3, 15, 8, tzinfo=timezone.utc)
        first = await repo.create(_remark(test_user, created_at=created))
        second = await repo.create(_remark(test_user, created_at=created + timedelta(minutes=5)))
        await repo.create(_remark(test_user, date=datetime(2024, 3, 16, 0, 0)))

        results = await repo.get_by_date_range(
            test_user.id, datetime(2024, 3, 15), datetime(2024, 3, 15, 23, 59, 59, 999000)
        )

        assert [r.id for r in results] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_status_and_priority_filters(self, db_session: AsyncSession, test_user: User):
        repo = RemarkRepository(db_session)
        done_high = await repo.create(_remark(test_user, done=True, priority="high"))
        open_low = await repo.create(_remark(test_user, priority="low"))

        assert [r.id for r in await repo.get_by_status(test_user.id, True)] == [done_high.id]
        assert [r.id for r in await repo.get_by_status(test_user.id, False)] == [open_low.id]
        assert [r.id for r in await repo.get_by_priority(test_user.id, "low")] == [open_low.id]
        assert await repo.get_by_priority(test_user.id, "medium") == []

    @pytest.mark.asyncio
    async def test_queries_scoped_to_owner(
        self, db_session: AsyncSession, test_user: User, other_user: User
    ):
        """Another user's remarks never show up in list queries."""
        repo = RemarkRepository(db_session)
        await repo.create(_remark(other_user, done=True, priority="high"))

        assert await repo.get_all_by_user(test_user.id) == []
        assert await repo.get_by_status(test_user.id, True) == []
        assert await repo.get_by_priority(test_user.id, "high") == []
        assert await repo.get_by_date_range(
            test_user.id, datetime(2024, 1, 1), datetime(2024, 12, 31)
        ) == []

    @pytest.mark.asyncio
    async def test_financial_summary(
        self, db_session: AsyncSession, test_user: User, other_user: User
    ):
        repo = RemarkRepository(db_session)
        await repo.create(_remark(test_user))
        await repo.create(_remark(test_user, total_amount=Decimal("50"), done=True))
        await repo.create(_remark(other_user, total_amount=Decimal("1000")))

        summary = await repo.get_financial_summary(test_user.id)

        assert summary == {
            "total_amount": 150.0,
            "total_advance": 80.0,
            "total_pending": 70.0,
            "completed_remarks": 1,
            "pending_remarks": 1,
        }

    @pytest.mark.asyncio
    async def test_delete(self, db_session: AsyncSession, test_user: User):
        repo = RemarkRepository(db_session)
        remark = await repo.create(_remark(test_user))
        remark_id = remark.id

        await repo.delete(remark)

        assert await repo.get_by_id(remark_id) is None
