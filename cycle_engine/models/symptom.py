"""
Symptom model definitions used for advice personalization.
"""
from enum import Enum
from datetime import date
from pydantic import BaseModel, field_validator

from cycle_engine.utils.dates import to_calendar_date

class Mood(str, Enum):
    HAPPY = "happy"
    ENERGETIC = "energetic"
    CALM = "calm"
    IRRITABLE = "irritable"
    SAD = "sad"

    @property
    def score(self) -> int:
        """Chart value, 5 being the best mood."""
        return _MOOD_SCORES[self]

class PainLevel(str, Enum):
    NONE = "none"
    LIGHT = "light"
    MODERATE = "moderate"
    STRONG = "strong"

    @property
    def score(self) -> int:
        return list(PainLevel).index(self)

class FlowLevel(str, Enum):
    NONE = "none"
    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"

    @property
    def score(self) -> int:
        return list(FlowLevel).index(self)

_MOOD_SCORES = {
    Mood.HAPPY: 5,
    Mood.ENERGETIC: 4,
    Mood.CALM: 3,
    Mood.IRRITABLE: 2,
    Mood.SAD: 1,
}

class SymptomLog(BaseModel):
    """
    Represents how the user felt on a given day.
    """
    date: date
    mood: Mood = Mood.CALM
    pain: PainLevel = PainLevel.NONE
    flow: FlowLevel = FlowLevel.NONE

    @field_validator("date", mode="before")
    @classmethod
    def normalize_date(cls, value):
        return to_calendar_date(value)

class Advice(BaseModel):
    """
    Nutrition and wellness advice for a phase.
    """
    nutrition: str
    wellness: str
