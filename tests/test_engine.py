"""Tests for the memoized engine facade."""
from datetime import date

from cycle_engine.models.settings import CycleSettings
from cycle_engine.models.phase import CyclePhase, DayClassification
from cycle_engine.services import engine as engine_module
from cycle_engine.services.cycle import classify_day, summarize_today
from cycle_engine.services.engine import CycleEngine
from cycle_engine.services.history import CycleHistory

def test_engine_matches_pure_functions(irregular_history, settings):
    """Test that the facade returns what the pure functions compute."""
    engine = CycleEngine(irregular_history, settings)
    day = date(2024, 4, 8)

    assert engine.classify_day(day) == classify_day(day, irregular_history, settings)
    assert engine.summarize_today(day) == summarize_today(day, irregular_history, settings)
    assert engine.accuracy() == 50

def test_results_are_memoized(regular_history, settings):
    """Test that repeated queries on the same snapshot hit the cache."""
    engine = CycleEngine(regular_history, settings)
    day = date(2024, 5, 1)

    engine.classify_day(day)
    engine.classify_day(day)
    CycleEngine(list(reversed(regular_history)), settings).classify_day(day)

    info = engine_module._cached_classify_day.cache_info()
    assert info.misses == 1
    assert info.hits == 2

def test_new_snapshot_is_recomputed(settings):
    """Test that editing the history changes the result."""
    history = CycleHistory().add_start(date(2024, 1, 1), event_id="e1")
    day = date(2024, 1, 20)

    before = CycleEngine(history, settings).classify_day(day)
    after = CycleEngine(history.add_start(date(2024, 1, 20), event_id="e2"), settings).classify_day(day)

    assert before == DayClassification.SAFE
    assert after == DayClassification.PERIOD

def test_month_grid_copy_is_independent(single_event_history, settings):
    """Test that callers cannot alter a cached grid."""
    engine = CycleEngine(single_event_history, settings)

    grid = engine.classify_month(2024, 1)
    grid.clear()

    assert len(engine.classify_month(2024, 1)) == 31

def test_pregnancy_mode_pauses_projection(regular_history):
    """Test that pregnancy mode disables cycle predictions."""
    settings = CycleSettings(is_pregnancy_mode=True)
    engine = CycleEngine(regular_history, settings)

    assert engine.is_paused
    assert engine.classify_day(date(2024, 1, 1)) is None
    assert engine.summarize_today(date(2024, 1, 1)) is None
    assert engine.classify_month(2024, 1) == {}
    assert engine.accuracy() == 100

def test_summarize_defaults_to_today(settings):
    """Test that the reference day defaults to the current date."""
    engine = CycleEngine([], settings)

    summary = engine.summarize_today()

    assert summary.phase_info.phase == CyclePhase.UNKNOWN
