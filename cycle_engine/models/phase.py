"""
Phase model definitions for derived, non-persisted engine outputs.
"""
from enum import Enum
from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict

from cycle_engine.models.event import CycleEvent

class CyclePhase(str, Enum):
    """
    Phase of the cycle a given day belongs to.
    """
    MENSTRUAL = "menstrual"
    FOLLICULAR = "follicular"
    OVULATION = "ovulation"
    LUTEAL = "luteal"
    UNKNOWN = "unknown"

class DayClassification(str, Enum):
    """
    Calendar classification of a single day.
    """
    PERIOD = "period"
    FERTILE = "fertile"
    OVULATION = "ovulation"
    SAFE = "safe"

class CycleWindow(BaseModel):
    """
    Inclusive range of calendar days.
    """
    model_config = ConfigDict(frozen=True)

    start: date
    end: date

    @property
    def length(self) -> int:
        """Number of days in the window, both ends included."""
        return (self.end - self.start).days + 1

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

class PhaseInfo(BaseModel):
    """
    Current phase with a human readable label and a counter within the phase.
    """
    model_config = ConfigDict(frozen=True)

    phase: CyclePhase
    day_label: str
    day_in_phase: int = 0

class CycleAnchor(BaseModel):
    """
    Recorded event governing a day, and the next recorded start if known.
    """
    model_config = ConfigDict(frozen=True)

    anchor: CycleEvent
    closing_event: Optional[CycleEvent] = None

    @property
    def is_closed(self) -> bool:
        """True when the real length of this cycle is known."""
        return self.closing_event is not None

class TodaySummary(BaseModel):
    """
    Forward-looking predictions and phase information for a reference day.
    """
    model_config = ConfigDict(frozen=True)

    next_period_window: Optional[CycleWindow] = None
    ovulation_date: Optional[date] = None
    fertile_window: Optional[CycleWindow] = None
    current_period: Optional[CycleEvent] = None
    phase_info: PhaseInfo
    days_until_next_period: Optional[int] = None

    @property
    def is_late(self) -> bool:
        """True once the predicted start has passed without a new record."""
        return self.days_until_next_period is not None and self.days_until_next_period < 0

    def cycle_progress(self, cycle_length: int) -> Optional[float]:
        """
        Percentage of the current cycle already elapsed, clamped to [0, 100].
        """
        if self.days_until_next_period is None:
            return None
        progress = (cycle_length - self.days_until_next_period) / cycle_length * 100
        return max(0.0, min(100.0, progress))
