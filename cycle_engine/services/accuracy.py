"""
Prediction accuracy backtest over the recorded history.

Each recorded start from the third one on is predicted again using only the
starts recorded before it (mean gap added to the previous start), and the
share of predictions that landed within the tolerance is reported.
"""
from typing import Iterable, List
from statistics import mean

from aws_lambda_powertools import Logger

from cycle_engine.models.event import CycleEvent
from cycle_engine.services.constants import (
    ACCURACY_TOLERANCE_DAYS,
    DEFAULT_ACCURACY,
    MIN_EVENTS_FOR_ACCURACY
)
from cycle_engine.services.utils import round_half_up, sort_events
from cycle_engine.utils.dates import add_days, days_between

logger = Logger()

def calculate_cycle_gaps(events: List[CycleEvent]) -> List[int]:
    """
    Days between consecutive recorded starts.

    Args:
        events: Events sorted by start date

    Returns:
        List of gaps, one fewer than the number of events
    """
    return [
        days_between(events[i].start_date, events[i - 1].start_date)
        for i in range(1, len(events))
    ]

def estimate_accuracy(history: Iterable[CycleEvent]) -> int:
    """
    Estimate how accurate start predictions have been so far.

    Args:
        history: Recorded events, in any order

    Returns:
        Percentage (0-100) of past starts predicted within two days, or the
        default of 85 when fewer than three starts are recorded

    Example:
        >>> estimate_accuracy(history)  # gaps 28, 30, 26
        50
    """
    events = sort_events(history)
    if len(events) < MIN_EVENTS_FOR_ACCURACY:
        return DEFAULT_ACCURACY

    predictions = len(events) - 2
    accurate = 0

    for target in range(2, len(events)):
        known = events[:target]
        avg_cycle_length = mean(calculate_cycle_gaps(known))
        predicted = add_days(known[-1].start_date, round_half_up(avg_cycle_length))
        actual = events[target].start_date

        if abs(days_between(actual, predicted)) <= ACCURACY_TOLERANCE_DAYS:
            accurate += 1

    accuracy = round_half_up(100 * accurate / predictions)
    logger.info("Estimated prediction accuracy", extra={
        "predictions": predictions,
        "accurate": accurate,
        "accuracy": accuracy
    })
    return accuracy
