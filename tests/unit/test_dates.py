"""Unit tests for business-date parsing."""

from datetime import date, datetime, timezone

import pytest

from remarkbook.core.dates import local_day_bounds, parse_business_date


class TestParseBusinessDate:
    def test_bare_date_is_local_midnight(self):
        assert parse_business_date("2024-03-15") == datetime(2024, 3, 15, 0, 0)

    def test_naive_datetime_kept_as_is(self):
        assert parse_business_date("2024-03-15T18:30:00") == datetime(2024, 3, 15, 18, 30)

    def test_offset_converted_to_local_time(self):
        expected = (
            datetime(2024, 3, 15, 10, 0, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)
        )

        assert parse_business_date("2024-03-15T10:00:00Z") == expected
        assert parse_business_date("2024-03-15T10:00:00+00:00") == expected

    def test_date_object(self):
        assert parse_business_date(date(2024, 3, 15)) == datetime(2024, 3, 15)

    @pytest.mark.parametrize("value", ["not-a-date", "2024-13-45", "", "   "])
    def test_malformed_values_raise(self, value):
        with pytest.raises(ValueError):
            parse_business_date(value)


class TestLocalDayBounds:
    def test_full_day_inclusive(self):
        start, end = local_day_bounds("2024-03-15")

        assert start == datetime(2024, 3, 15, 0, 0, 0, 0)
        assert end == datetime(2024, 3, 15, 23, 59, 59, 999000)

    def test_time_component_ignored(self):
        assert local_day_bounds("2024-03-15T22:10:00") == local_day_bounds("2024-03-15")
