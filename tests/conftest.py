"""
Pytest configuration and shared fixtures.
"""
import pytest
from dataclasses import dataclass
from datetime import date, timedelta
from typing import List

from cycle_engine.models.event import CycleEvent
from cycle_engine.models.settings import CycleSettings
from cycle_engine.services.engine import clear_cache

@pytest.fixture(autouse=True)
def fresh_engine_cache():
    """Keep memoized results from leaking between tests."""
    clear_cache()
    yield
    clear_cache()

@pytest.fixture
def settings() -> CycleSettings:
    """Default 28 day cycle with 5 day periods."""
    return CycleSettings(cycle_length=28, period_length=5)

@pytest.fixture
def single_event_history() -> List[CycleEvent]:
    """One recorded start, every later cycle is projected."""
    return [CycleEvent(id="e1", start_date=date(2024, 1, 1))]

@pytest.fixture
def closed_cycle_history() -> List[CycleEvent]:
    """Two recorded starts 28 days apart."""
    return [
        CycleEvent(id="e1", start_date=date(2024, 1, 1)),
        CycleEvent(id="e2", start_date=date(2024, 1, 29))
    ]

@pytest.fixture
def regular_history() -> List[CycleEvent]:
    """Five recorded starts exactly 28 days apart."""
    return [
        CycleEvent(id=f"e{i}", start_date=date(2024, 1, 1) + timedelta(days=i * 28))
        for i in range(5)
    ]

@pytest.fixture
def irregular_history() -> List[CycleEvent]:
    """Four recorded starts with gaps of 28, 30 and 26 days."""
    return [
        CycleEvent(id="e1", start_date=date(2024, 1, 1)),
        CycleEvent(id="e2", start_date=date(2024, 1, 29)),   # 28 days
        CycleEvent(id="e3", start_date=date(2024, 2, 28)),   # 30 days
        CycleEvent(id="e4", start_date=date(2024, 3, 25))    # 26 days
    ]

@pytest.fixture
def lambda_context():
    """Minimal Lambda context accepted by inject_lambda_context."""
    @dataclass
    class LambdaContext:
        function_name: str = "test"
        function_version: str = "$LATEST"
        memory_limit_in_mb: int = 128
        invoked_function_arn: str = "arn:aws:lambda:eu-west-1:123456789012:function:test"
        aws_request_id: str = "da658bd3-2d6f-4e7b-8ec2-937234644fdc"

    return LambdaContext()
