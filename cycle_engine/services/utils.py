"""
Shared utility functions for cycle-related services.

These utilities are used across the engine modules to handle common
operations like event ordering, period interval lookup and rounding.
"""
import math
from typing import Iterable, List, Optional
from datetime import date

from cycle_engine.models.event import CycleEvent
from cycle_engine.models.phase import CycleWindow
from cycle_engine.services.constants import (
    OVULATION_OFFSET_DAYS,
    FERTILE_DAYS_BEFORE_OVULATION,
    FERTILE_DAYS_AFTER_OVULATION
)
from cycle_engine.utils.dates import add_days

def sort_events(events: Iterable[CycleEvent], reverse: bool = False) -> List[CycleEvent]:
    """
    Sort events by start date.

    Args:
        events: Cycle events in any order
        reverse: Whether to sort in reverse order (newest first)

    Returns:
        New list of events sorted by start date

    Example:
        >>> newest_first = sort_events(history, reverse=True)
    """
    return sorted(events, key=lambda e: e.start_date, reverse=reverse)

def get_last_event(events: Iterable[CycleEvent]) -> Optional[CycleEvent]:
    """Return the event with the latest start date, or None."""
    return max(events, key=lambda e: e.start_date, default=None)

def find_containing_event(
    day: date,
    events: Iterable[CycleEvent],
    period_length: int
) -> Optional[CycleEvent]:
    """
    Find the recorded period whose interval contains a day.

    Every event is scanned: at boundary days the event containing the day
    can differ from the one the day is anchored to.

    Args:
        day: Day to look up
        events: Cycle events in any order
        period_length: Assumed period length for events without an end date

    Returns:
        The containing event, or None
    """
    for event in events:
        if event.contains(day, period_length):
            return event
    return None

def ovulation_before(next_cycle_start: date) -> date:
    """Ovulation day for a cycle ending the day before ``next_cycle_start``."""
    return add_days(next_cycle_start, -OVULATION_OFFSET_DAYS)

def fertile_window_for(ovulation_date: date) -> CycleWindow:
    """Fertile window around an ovulation day."""
    return CycleWindow(
        start=add_days(ovulation_date, -FERTILE_DAYS_BEFORE_OVULATION),
        end=add_days(ovulation_date, FERTILE_DAYS_AFTER_OVULATION)
    )

def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves going up.

    The builtin round() rounds halves to even, which would make a 28.5 day
    average predict 28 days.
    """
    return int(math.floor(value + 0.5))
