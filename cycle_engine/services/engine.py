"""
Memoized entry point over a snapshot of history and settings.

Results are cached on (history snapshot, settings, reference day). Events
and settings are frozen models, so the snapshot is hashable and can never
change under a cached entry.
"""
from functools import lru_cache
from typing import Dict, Iterable, Optional, Tuple
from datetime import date

from aws_lambda_powertools import Logger

from cycle_engine.models.event import CycleEvent
from cycle_engine.models.settings import CycleSettings
from cycle_engine.models.phase import DayClassification, TodaySummary
from cycle_engine.services.accuracy import estimate_accuracy
from cycle_engine.services.constants import ENGINE_CACHE_SIZE
from cycle_engine.services.cycle import classify_day, classify_month, summarize_today
from cycle_engine.services.utils import sort_events

logger = Logger()

Snapshot = Tuple[CycleEvent, ...]

@lru_cache(maxsize=ENGINE_CACHE_SIZE)
def _cached_classify_day(day: date, snapshot: Snapshot, settings: CycleSettings) -> DayClassification:
    return classify_day(day, snapshot, settings)

@lru_cache(maxsize=ENGINE_CACHE_SIZE)
def _cached_summarize_today(today: date, snapshot: Snapshot, settings: CycleSettings) -> TodaySummary:
    return summarize_today(today, snapshot, settings)

@lru_cache(maxsize=ENGINE_CACHE_SIZE)
def _cached_classify_month(
    year: int,
    month: int,
    snapshot: Snapshot,
    settings: CycleSettings
) -> Dict[date, DayClassification]:
    return classify_month(year, month, snapshot, settings)

@lru_cache(maxsize=ENGINE_CACHE_SIZE)
def _cached_accuracy(snapshot: Snapshot) -> int:
    return estimate_accuracy(snapshot)

class CycleEngine:
    """
    Cycle predictions for one user snapshot.

    While pregnancy mode is on, cycle projection is paused: day and today
    queries return None and month grids are empty. Accuracy only depends on
    past records and is still reported.
    """

    def __init__(self, history: Iterable[CycleEvent], settings: CycleSettings):
        self.snapshot: Snapshot = tuple(sort_events(history))
        self.settings = settings

    @property
    def is_paused(self) -> bool:
        return self.settings.is_pregnancy_mode

    def classify_day(self, day: date) -> Optional[DayClassification]:
        if self.is_paused:
            return None
        return _cached_classify_day(day, self.snapshot, self.settings)

    def classify_month(self, year: int, month: int) -> Dict[date, DayClassification]:
        if self.is_paused:
            logger.debug("Pregnancy mode on, skipping month grid")
            return {}
        # Copy so callers can't alter the cached grid
        return dict(_cached_classify_month(year, month, self.snapshot, self.settings))

    def summarize_today(self, today: Optional[date] = None) -> Optional[TodaySummary]:
        if self.is_paused:
            logger.debug("Pregnancy mode on, skipping today summary")
            return None
        return _cached_summarize_today(today or date.today(), self.snapshot, self.settings)

    def accuracy(self) -> int:
        return _cached_accuracy(self.snapshot)

def clear_cache() -> None:
    """Drop every memoized result."""
    _cached_classify_day.cache_clear()
    _cached_summarize_today.cache_clear()
    _cached_classify_month.cache_clear()
    _cached_accuracy.cache_clear()
