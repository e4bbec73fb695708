"""
Service module for activity markers shown on the calendar grid.
"""
from typing import Dict, Iterable, List
from datetime import date

from cycle_engine.models.activity import ActivityLog

def activities_in_month(
    activities: Iterable[ActivityLog],
    year: int,
    month: int
) -> Dict[date, List[ActivityLog]]:
    """
    Group a month's activity logs by day.

    Args:
        activities: Activity logs, in any order
        year: Calendar year
        month: Month number (1-12)

    Returns:
        Mapping of each marked day of the month to its logs, days ascending

    Example:
        >>> activities_in_month(logs, 2024, 2)
        {datetime.date(2024, 2, 14): [ActivityLog(id='a1', ...)]}
    """
    by_day: Dict[date, List[ActivityLog]] = {}
    for log in sorted(activities, key=lambda a: a.date):
        if log.date.year == year and log.date.month == month:
            by_day.setdefault(log.date, []).append(log)
    return by_day
