"""
Service module for resolving the recorded cycle that governs a day.

A day is anchored to the most recent recorded start on or before it. When a
later start is also recorded the cycle is closed and its real length is known,
otherwise the cycle is open and must be projected with the configured average.

Typical usage:
    anchor = resolve_anchor(day, history)
    if anchor is None:
        ...  # not enough data
    elif anchor.is_closed:
        ...  # exact cycle length
"""
from typing import Iterable, Optional
from datetime import date

from cycle_engine.models.event import CycleEvent
from cycle_engine.models.phase import CycleAnchor
from cycle_engine.services.utils import sort_events

def resolve_anchor(day: date, history: Iterable[CycleEvent]) -> Optional[CycleAnchor]:
    """
    Find the anchor event of a day and the event closing its cycle.

    Args:
        day: Day to resolve
        history: Recorded events, in any order

    Returns:
        CycleAnchor, or None when no recorded start is on or before the day

    Example:
        >>> anchor = resolve_anchor(date(2024, 1, 10), history)
        >>> anchor.anchor.start_date, anchor.is_closed
        (datetime.date(2024, 1, 1), True)
    """
    newest_first = sort_events(history, reverse=True)

    for index, event in enumerate(newest_first):
        if event.start_date <= day:
            closing_event = newest_first[index - 1] if index > 0 else None
            return CycleAnchor(anchor=event, closing_event=closing_event)

    return None
