"""
Activity model definition for days the user marked on the calendar.
"""
from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator

from cycle_engine.utils.dates import to_calendar_date

class ActivityLog(BaseModel):
    """
    Represents a marked day, with an optional note.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    date: date
    note: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def normalize_date(cls, value):
        return to_calendar_date(value)
