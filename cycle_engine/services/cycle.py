"""
Service module for cycle day classification and predictions.

This module turns recorded cycle starts plus the user's settings into a
classification for any calendar day and a summary of the cycle as seen
from a reference day ("today"). Everything here is pure: inputs are never
mutated and identical inputs give identical outputs.

Typical usage:
    day_type = classify_day(day, history, settings)
    summary = summarize_today(date.today(), history, settings)
    grid = classify_month(2024, 3, history, settings)
"""
import calendar
from typing import Dict, Iterable, List, Optional
from datetime import date

from aws_lambda_powertools import Logger

from cycle_engine.models.event import CycleEvent
from cycle_engine.models.settings import CycleSettings
from cycle_engine.models.phase import (
    CyclePhase,
    CycleWindow,
    DayClassification,
    PhaseInfo,
    TodaySummary
)
from cycle_engine.services.anchor import resolve_anchor
from cycle_engine.services.constants import PENDING_LABEL
from cycle_engine.services.utils import (
    find_containing_event,
    get_last_event,
    ovulation_before,
    fertile_window_for
)
from cycle_engine.utils.dates import add_days, days_between

logger = Logger()

def classify_day(
    day: date,
    history: Iterable[CycleEvent],
    settings: CycleSettings
) -> DayClassification:
    """
    Classify a calendar day.

    Recorded periods take priority over any projection. Days inside a closed
    cycle use the real next start to place ovulation; days after the last
    recorded start are projected with the configured cycle length.

    Args:
        day: Day to classify
        history: Recorded events, in any order
        settings: Cycle and period lengths

    Returns:
        DayClassification for the day

    Example:
        >>> classify_day(date(2024, 1, 15), history, settings)
        <DayClassification.OVULATION: 'ovulation'>
    """
    events = list(history)

    if find_containing_event(day, events, settings.period_length) is not None:
        return DayClassification.PERIOD

    resolved = resolve_anchor(day, events)
    if resolved is None:
        return DayClassification.SAFE

    if resolved.is_closed:
        next_start = resolved.closing_event.start_date
        if day >= next_start:
            return DayClassification.SAFE
    else:
        anchor_start = resolved.anchor.start_date
        cycle_index = days_between(day, anchor_start) // settings.cycle_length
        current_start = add_days(anchor_start, cycle_index * settings.cycle_length)

        # Projected period of a future cycle; the recorded one was checked above
        if cycle_index > 0 and days_between(day, current_start) < settings.period_length:
            return DayClassification.PERIOD
        next_start = add_days(current_start, settings.cycle_length)

    ovulation_date = ovulation_before(next_start)
    if day == ovulation_date:
        return DayClassification.OVULATION
    if fertile_window_for(ovulation_date).contains(day):
        return DayClassification.FERTILE
    return DayClassification.SAFE

def classify_month(
    year: int,
    month: int,
    history: Iterable[CycleEvent],
    settings: CycleSettings
) -> Dict[date, DayClassification]:
    """
    Classify every day of a calendar month.

    Args:
        year: Calendar year
        month: Month number (1-12)
        history: Recorded events, in any order
        settings: Cycle and period lengths

    Returns:
        Ordered mapping of each day of the month to its classification
    """
    events = list(history)
    _, days_in_month = calendar.monthrange(year, month)
    return {
        day: classify_day(day, events, settings)
        for day in (date(year, month, n) for n in range(1, days_in_month + 1))
    }

def _phase_info(
    today: date,
    last_start: date,
    ovulation_date: date,
    settings: CycleSettings
) -> PhaseInfo:
    day_of_cycle = days_between(today, last_start) + 1

    if day_of_cycle < 1:
        return PhaseInfo(phase=CyclePhase.UNKNOWN, day_label=PENDING_LABEL, day_in_phase=0)
    if day_of_cycle <= settings.period_length:
        return PhaseInfo(
            phase=CyclePhase.MENSTRUAL,
            day_label=f"Day {day_of_cycle}",
            day_in_phase=day_of_cycle
        )
    # Ovulation must be checked before the before/after split
    if today == ovulation_date:
        return PhaseInfo(phase=CyclePhase.OVULATION, day_label="Ovulation day", day_in_phase=1)
    if today < ovulation_date:
        return PhaseInfo(
            phase=CyclePhase.FOLLICULAR,
            day_label=f"Day {day_of_cycle}",
            day_in_phase=day_of_cycle
        )

    days_past_ovulation = days_between(today, ovulation_date)
    return PhaseInfo(
        phase=CyclePhase.LUTEAL,
        day_label=f"{days_past_ovulation} DPO",
        day_in_phase=days_past_ovulation
    )

def summarize_today(
    today: date,
    history: Iterable[CycleEvent],
    settings: CycleSettings
) -> TodaySummary:
    """
    Summarize the cycle as seen from a reference day.

    Predictions are projected from the most recent recorded start using the
    configured cycle and period lengths.

    Args:
        today: Reference day
        history: Recorded events, in any order
        settings: Cycle and period lengths

    Returns:
        TodaySummary; with an empty history every prediction is None and the
        phase is unknown
    """
    events: List[CycleEvent] = list(history)
    last_event = get_last_event(events)

    if last_event is None:
        logger.debug("No recorded periods, nothing to predict")
        return TodaySummary(
            phase_info=PhaseInfo(phase=CyclePhase.UNKNOWN, day_label=PENDING_LABEL)
        )

    next_period_start = add_days(last_event.start_date, settings.cycle_length)
    next_period_window = CycleWindow(
        start=next_period_start,
        end=add_days(next_period_start, settings.period_length - 1)
    )
    ovulation_date = ovulation_before(next_period_start)
    current_period: Optional[CycleEvent] = find_containing_event(
        today, events, settings.period_length
    )

    summary = TodaySummary(
        next_period_window=next_period_window,
        ovulation_date=ovulation_date,
        fertile_window=fertile_window_for(ovulation_date),
        current_period=current_period,
        phase_info=_phase_info(today, last_event.start_date, ovulation_date, settings),
        days_until_next_period=days_between(next_period_start, today)
    )

    logger.debug("Computed today summary", extra={
        "today": str(today),
        "last_start": str(last_event.start_date),
        "next_period_start": str(next_period_start),
        "phase": summary.phase_info.phase.value
    })
    return summary
