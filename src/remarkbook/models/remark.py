"""Remark model: a user-owned note with scheduling, money and priority fields."""
import enum
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import Boolean, CheckConstraint, DateTime, ForeignKey, Index, Numeric, String, Text, event
from sqlalchemy.orm import Mapped, mapped_column, validates

from remarkbook.models.base import BaseModel

ZERO = Decimal("0")


class RemarkPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


class Remark(BaseModel):
    """Remark owned by exactly one user.

    ``pending_amount`` is derived from ``total_amount - advance_amount`` and is
    recomputed before every INSERT and UPDATE, so it never drifts from the
    stored amounts.

    ``date`` is the business date chosen by the user. It is stored as a naive
    local wall-clock time so that day-range queries work in local time.
    """

    __tablename__ = "remarks"
    __table_args__ = (
        CheckConstraint("priority IN ('low', 'medium', 'high')", name="ck_remarks_priority"),
        Index("ix_remarks_user_id_date", "user_id", "date"),
    )

    user_id: Mapped[UUID] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    mobile_number: Mapped[str | None] = mapped_column(String(30), nullable=True)
    from_address: Mapped[str | None] = mapped_column(Text, nullable=True)
    to_address: Mapped[str | None] = mapped_column(Text, nullable=True)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    total_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=ZERO)
    advance_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=ZERO)
    pending_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=ZERO)
    special_note: Mapped[str | None] = mapped_column(Text, nullable=True)
    done: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    priority: Mapped[str] = mapped_column(
        String(10), nullable=False, default=RemarkPriority.MEDIUM.value
    )

    @validates("user_id")
    def _validate_owner(self, key: str, value: UUID) -> UUID:
        if self.user_id is not None and value != self.user_id:
            raise ValueError("Remark owner cannot be changed")
        return value

    @validates("priority")
    def _validate_priority(self, key: str, value) -> str:
        value = RemarkPriority(value).value
        return value

    def recalculate_pending(self) -> None:
        """Set ``pending_amount`` from the current amounts (missing amounts count as zero)."""
        total = self.total_amount if self.total_amount is not None else ZERO
        advance = self.advance_amount if self.advance_amount is not None else ZERO
        self.pending_amount = Decimal(total) - Decimal(advance)

    def __repr__(self) -> str:
        return f"<Remark(id={self.id}, user_id={self.user_id}, date={self.date}, done={self.done})>"


@event.listens_for(Remark, "before_insert")
@event.listens_for(Remark, "before_update")
def _derive_pending_amount(mapper, connection, target: Remark) -> None:
    target.recalculate_pending()
