"""
Event model definition for recorded cycle-start events.
"""
from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from cycle_engine.utils.dates import add_days, to_calendar_date

class CycleEvent(BaseModel):
    """
    Represents one recorded period, from the day it started to an optional
    logged end day.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    start_date: date
    end_date: Optional[date] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def normalize_dates(cls, value):
        """Accept ISO strings and date-times from storage."""
        if value is None:
            return value
        return to_calendar_date(value)

    @model_validator(mode="after")
    def check_end_after_start(self) -> "CycleEvent":
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

    def effective_end(self, period_length: int) -> date:
        """
        Last day of the period.

        Uses the logged end date when present, otherwise assumes the
        configured period length.
        """
        if self.end_date is not None:
            return self.end_date
        return add_days(self.start_date, period_length - 1)

    def contains(self, day: date, period_length: int) -> bool:
        """Check whether a day falls inside this period."""
        return self.start_date <= day <= self.effective_end(period_length)
