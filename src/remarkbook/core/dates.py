"""Business-date parsing.

Remark dates are stored as naive local wall-clock times. Incoming values with
an explicit offset are converted to local time first; naive values and bare
calendar dates are taken as already local.
"""

from datetime import date, datetime, time

END_OF_DAY = time(23, 59, 59, 999000)


def to_local_naive(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def parse_business_date(value: str | date | datetime) -> datetime:
    """Parse an ISO date or date-time into a naive local datetime.

    Raises:
        ValueError: If the value cannot be parsed
    """
    if isinstance(value, datetime):
        return to_local_naive(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if not isinstance(value, str) or not value.strip():
        raise ValueError("Invalid date format")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return to_local_naive(datetime.fromisoformat(text))


def local_day_bounds(value: str | date | datetime) -> tuple[datetime, datetime]:
    """Return the first and last millisecond of the local day containing ``value``."""
    day = parse_business_date(value).date()
    return datetime.combine(day, time.min), datetime.combine(day, END_OF_DAY)
