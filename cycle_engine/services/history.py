"""
Service module for the recorded period history.

The history is an arena of immutable CycleEvent records keyed by id, with a
sorted index derived from it. Edits never touch an existing history: they
return a new one, so a snapshot handed to the engine stays consistent.

Typical usage:
    history = CycleHistory()
    history = history.add_start(date(2024, 1, 1))
    history = history.log_end(history.last_event.id, date(2024, 1, 5))
    for period in get_period_history(history.events, settings, periods=3):
        print(f"{period['start_date']} to {period['end_date']}")
"""
import uuid
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple
from datetime import date

from aws_lambda_powertools import Logger

from cycle_engine.models.event import CycleEvent
from cycle_engine.models.settings import CycleSettings
from cycle_engine.services.exceptions import (
    DuplicateEventError,
    EventNotFoundError,
    InvalidEventError
)
from cycle_engine.services.utils import sort_events
from cycle_engine.utils.dates import days_between

logger = Logger()

class CycleHistory:
    """
    Immutable collection of recorded periods.
    """

    def __init__(self, events: Iterable[CycleEvent] = ()):
        records = {}
        starts = set()
        for event in events:
            if event.id in records:
                raise DuplicateEventError(f"Event id {event.id} is already used")
            if event.start_date in starts:
                raise DuplicateEventError(f"A period already starts on {event.start_date}")
            records[event.id] = event
            starts.add(event.start_date)
        self._records: Mapping[str, CycleEvent] = MappingProxyType(records)
        self._events: Tuple[CycleEvent, ...] = tuple(sort_events(records.values()))

    @property
    def events(self) -> Tuple[CycleEvent, ...]:
        """Events ordered by start date, oldest first."""
        return self._events

    @property
    def last_event(self) -> Optional[CycleEvent]:
        return self._events[-1] if self._events else None

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self):
        return iter(self._events)

    def __contains__(self, event_id: object) -> bool:
        return event_id in self._records

    def get(self, event_id: str) -> CycleEvent:
        """
        Look up an event by id.

        Raises:
            EventNotFoundError: If the id is unknown
        """
        try:
            return self._records[event_id]
        except KeyError:
            raise EventNotFoundError(f"No event with id {event_id}") from None

    def add_start(self, start_date: date, event_id: Optional[str] = None) -> "CycleHistory":
        """
        Record the start of a period.

        Args:
            start_date: First day of the period
            event_id: Optional id, a random one is generated otherwise

        Returns:
            New history including the event

        Raises:
            DuplicateEventError: If a period already starts that day or the id is taken
        """
        event = CycleEvent(id=event_id or uuid.uuid4().hex, start_date=start_date)
        updated = CycleHistory((*self._events, event))

        logger.info("Recorded period start", extra={
            "event_id": event.id,
            "start_date": str(event.start_date)
        })
        return updated

    def log_end(self, event_id: str, end_date: date) -> "CycleHistory":
        """
        Record the last day of a period.

        Raises:
            EventNotFoundError: If the id is unknown
            InvalidEventError: If the end is before the start
        """
        event = self.get(event_id)
        if end_date < event.start_date:
            raise InvalidEventError(
                f"End date {end_date} is before start date {event.start_date}"
            )

        updated = event.model_copy(update={"end_date": end_date})
        logger.info("Recorded period end", extra={
            "event_id": event_id,
            "end_date": str(end_date)
        })
        return CycleHistory(updated if e.id == event_id else e for e in self._events)

    def remove(self, event_id: str) -> "CycleHistory":
        """
        Delete a recorded period.

        Raises:
            EventNotFoundError: If the id is unknown
        """
        self.get(event_id)
        logger.info("Removed period", extra={"event_id": event_id})
        return CycleHistory(e for e in self._events if e.id != event_id)

def get_period_history(
    events: Iterable[CycleEvent],
    settings: CycleSettings,
    periods: Optional[int] = None
) -> List[Dict[str, Any]]:
    """
    Get recorded period history, newest first.

    Args:
        events: Recorded events, in any order
        settings: Used for the length of periods without a logged end
        periods: Optional number of most recent periods to return

    Returns:
        List of period details containing:
        - start_date: Period start date
        - end_date: Logged or assumed last day
        - duration: Period duration in days
        - cycle_length: Days until the following start, None for the latest

    Example:
        >>> get_period_history(history.events, settings, periods=1)
        [{'start_date': ..., 'end_date': ..., 'duration': 5, 'cycle_length': None}]
    """
    ordered = sort_events(events)
    report = []

    for index, event in enumerate(ordered):
        end_date = event.effective_end(settings.period_length)
        following = ordered[index + 1] if index + 1 < len(ordered) else None
        report.append({
            "start_date": event.start_date,
            "end_date": end_date,
            "duration": days_between(end_date, event.start_date) + 1,
            "cycle_length": (
                days_between(following.start_date, event.start_date) if following else None
            )
        })

    report.reverse()
    if periods is not None:
        report = report[:periods]
    return report
