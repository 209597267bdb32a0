"""Unit tests for the Remark model's derived field and validators."""

from datetime import datetime
from decimal import Decimal
from uuid import uuid4

import pytest

from remarkbook.models.remark import Remark, RemarkPriority


def _remark(**overrides) -> Remark:
    values = {
        "user_id": uuid4(),
        "date": datetime(2024, 3, 15, 10),
        "content": "Deliver parcel",
    }
    values.update(overrides)
    return Remark(**values)


class TestPendingAmount:
    def test_pending_is_total_minus_advance(self):
        remark = _remark(total_amount=Decimal("1500"), advance_amount=Decimal("400"))
        remark.recalculate_pending()

        assert remark.pending_amount == Decimal("1100")

    def test_missing_amounts_count_as_zero(self):
        remark = _remark(total_amount=Decimal("250"))
        remark.recalculate_pending()

        assert remark.pending_amount == Decimal("250")

    def test_recalculated_after_change(self):
        remark = _remark(total_amount=Decimal("100"), advance_amount=Decimal("20"))
        remark.recalculate_pending()
        remark.advance_amount = Decimal("100")
        remark.recalculate_pending()

        assert remark.pending_amount == Decimal("0")


class TestValidators:
    def test_priority_accepts_enum_and_string(self):
        assert _remark(priority=RemarkPriority.HIGH).priority == "high"
        assert _remark(priority="low").priority == "low"

    def test_priority_rejects_unknown(self):
        with pytest.raises(ValueError):
            _remark(priority="urgent")

    def test_owner_cannot_change(self):
        remark = _remark()

        with pytest.raises(ValueError):
            remark.user_id = uuid4()

    def test_priority_values(self):
        assert RemarkPriority.values() == ["low", "medium", "high"]
