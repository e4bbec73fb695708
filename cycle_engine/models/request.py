"""
Request models for the Lambda handlers.
"""
from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from cycle_engine.models.activity import ActivityLog
from cycle_engine.models.event import CycleEvent
from cycle_engine.models.settings import CycleSettings
from cycle_engine.models.symptom import SymptomLog
from cycle_engine.utils.dates import to_calendar_date

class PredictionRequest(BaseModel):
    """
    Snapshot of a user's history and settings, plus the reference day.
    """
    settings: CycleSettings = Field(default_factory=CycleSettings)
    history: List[CycleEvent] = Field(default_factory=list)
    today: Optional[date] = None
    symptom: Optional[SymptomLog] = None

    @field_validator("today", mode="before")
    @classmethod
    def normalize_today(cls, value):
        if value is None:
            return value
        return to_calendar_date(value)

class CalendarRequest(PredictionRequest):
    """
    Month grid request.
    """
    year: int = Field(..., ge=1, le=9999)
    month: int = Field(..., ge=1, le=12)
    activities: List[ActivityLog] = Field(default_factory=list)
