"""
Service module for phase-specific advice.

Advice text never influences classification; it only depends on the phase
reported for today and, optionally, the symptoms logged for the day.

Typical usage:
    >>> advice = get_personalized_advice(summary.phase_info.phase, today_log)
    >>> print(advice.wellness)
"""
from typing import Optional

from cycle_engine.models.phase import CyclePhase
from cycle_engine.models.symptom import Advice, SymptomLog
from cycle_engine.services.constants import (
    DEFAULT_ADVICE,
    LOW_MOOD_ADVICE,
    LOW_MOODS,
    PAIN_WELLNESS_ADVICE,
    PHASE_ADVICE
)

def get_personalized_advice(phase: CyclePhase, symptom: Optional[SymptomLog] = None) -> Advice:
    """
    Get nutrition and wellness advice for a phase.

    Args:
        phase: Current cycle phase
        symptom: Optional symptoms logged for the day

    Returns:
        Advice with the wellness text extended for pain and low mood

    Example:
        >>> log = SymptomLog(date=date.today(), pain=PainLevel.STRONG)
        >>> "Rest is essential" in get_personalized_advice(CyclePhase.MENSTRUAL, log).wellness
        True
    """
    base = PHASE_ADVICE.get(phase, DEFAULT_ADVICE)
    nutrition = base["nutrition"]
    wellness = [base["wellness"]]

    if symptom is not None:
        pain_advice = PAIN_WELLNESS_ADVICE.get(symptom.pain)
        if pain_advice:
            wellness.append(pain_advice)
        if symptom.mood in LOW_MOODS:
            wellness.append(LOW_MOOD_ADVICE)

    return Advice(nutrition=nutrition, wellness=" ".join(wellness))
