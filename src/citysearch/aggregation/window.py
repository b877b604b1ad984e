"""Date window for the "events this weekend" query."""

from datetime import UTC, datetime, timedelta


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def get_upcoming_sunday(now: datetime | None = None) -> datetime:
    """Return the end (23:59:59 UTC) of the next Sunday on or after ``now``.

    When ``now`` is already a Sunday the same day is returned.

    Args:
        now: Reference time; defaults to the current UTC time. Naive values
            are treated as UTC.
    """
    now = _as_utc(now or datetime.now(tz=UTC))
    days_until_sunday = (6 - now.weekday()) % 7
    sunday = now + timedelta(days=days_until_sunday)
    return datetime(sunday.year, sunday.month, sunday.day, 23, 59, 59, tzinfo=UTC)


def event_window(now: datetime | None = None) -> tuple[datetime, datetime]:
    """Return ``(start, end)`` from ``now`` through the upcoming Sunday."""
    start = _as_utc(now or datetime.now(tz=UTC)).replace(microsecond=0)
    return (start, get_upcoming_sunday(start))
