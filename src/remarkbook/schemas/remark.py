"""Pydantic schemas for remark endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Any, ClassVar
from uuid import UUID

from pydantic import Field, field_validator, model_validator

from remarkbook.core.dates import parse_business_date
from remarkbook.models.remark import RemarkPriority
from remarkbook.schemas.base import CamelModel


class RemarkCreate(CamelModel):
    """Request model for creating a remark. Only ``date`` and ``content`` are required."""

    name: str | None = Field(None, max_length=255)
    mobile_number: str | None = Field(None, max_length=30)
    from_address: str | None = None
    to_address: str | None = None
    date: datetime = Field(..., description="Business date (ISO date or date-time)")
    content: str = Field(..., min_length=1, description="Remark text")
    total_amount: Decimal = Field(Decimal("0"), ge=0)
    advance_amount: Decimal = Field(Decimal("0"), ge=0)
    special_note: str | None = None
    done: bool = False
    priority: RemarkPriority = RemarkPriority.MEDIUM

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value):
        return parse_business_date(value)

    @field_validator("content", mode="before")
    @classmethod
    def strip_content(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("total_amount", "advance_amount", mode="before")
    @classmethod
    def null_amount_is_zero(cls, value):
        return Decimal("0") if value is None else value


class RemarkUpdate(CamelModel):
    """Partial update of a remark.

    Only keys present in the request body are applied. Optional text fields
    may be set to null to clear them; the other fields cannot be nulled.
    """

    NON_NULLABLE: ClassVar[frozenset[str]] = frozenset(
        {"date", "content", "total_amount", "advance_amount", "done", "priority"}
    )

    name: str | None = Field(None, max_length=255)
    mobile_number: str | None = Field(None, max_length=30)
    from_address: str | None = None
    to_address: str | None = None
    date: datetime | None = None
    content: str | None = Field(None, min_length=1)
    total_amount: Decimal | None = Field(None, ge=0)
    advance_amount: Decimal | None = Field(None, ge=0)
    special_note: str | None = None
    done: bool | None = None
    priority: RemarkPriority | None = None

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value):
        if value is None:
            return value
        return parse_business_date(value)

    @field_validator("content", mode="before")
    @classmethod
    def strip_content(cls, value):
        return value.strip() if isinstance(value, str) else value

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        nulled = sorted(
            field
            for field in self.model_fields_set & self.NON_NULLABLE
            if getattr(self, field) is None
        )
        if nulled:
            raise ValueError(f"Fields cannot be null: {', '.join(nulled)}")
        return self

    def changes(self) -> dict[str, Any]:
        """Return only the fields the client actually sent, as model attribute values."""
        data = self.model_dump(exclude_unset=True)
        if "priority" in data:
            data["priority"] = RemarkPriority(data["priority"]).value
        return data


class RemarkResponse(CamelModel):
    """Remark as returned to its owner."""

    id: UUID
    user_id: UUID
    name: str | None = None
    mobile_number: str | None = None
    from_address: str | None = None
    to_address: str | None = None
    date: datetime
    content: str
    total_amount: float
    advance_amount: float
    pending_amount: float
    special_note: str | None = None
    done: bool
    priority: RemarkPriority
    created_at: datetime
    updated_at: datetime


class FinancialSummary(CamelModel):
    """Money and completion totals across all of a user's remarks."""

    total_amount: float = 0
    total_advance: float = 0
    total_pending: float = 0
    completed_remarks: int = 0
    pending_remarks: int = 0
