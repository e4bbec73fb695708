"""
Date normalization utilities.

Dates arrive at the engine boundary as calendar dates, naive date-times or
ISO-8601 strings coming from storage. The engine only ever works on calendar
days, so everything is truncated to a local calendar date here.
"""
from typing import Union
from datetime import date, datetime, timedelta

DateLike = Union[date, datetime, str]

def to_calendar_date(value: DateLike) -> date:
    """
    Normalize a date-like value to a local calendar date.

    Args:
        value: A date, datetime or ISO-8601 string
            Examples:
                "2024-01-01"
                "2024-01-01T10:30:00"
                "2024-01-01T22:00:00.000Z"

    Returns:
        Calendar date with the time-of-day dropped

    Raises:
        ValueError: If the value cannot be parsed as a date

    Example:
        >>> to_calendar_date("2024-03-05T08:00:00")
        datetime.date(2024, 3, 5)
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unsupported date value: {value!r}")

    text = value.strip()
    if len(text) == 10:
        return date.fromisoformat(text)

    # fromisoformat only understands the Z suffix from 3.11 on
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return to_calendar_date(datetime.fromisoformat(text))

def add_days(day: date, days: int) -> date:
    """Shift a calendar date by a number of days."""
    return day + timedelta(days=days)

def days_between(later: date, earlier: date) -> int:
    """Signed number of calendar days from ``earlier`` to ``later``."""
    return (later - earlier).days
