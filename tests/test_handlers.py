"""Tests for the Lambda handlers."""
import json

import pytest

from cycle_engine.handlers.calendar import handler as calendar_handler
from cycle_engine.handlers.prediction import handler as prediction_handler

@pytest.fixture
def request_body():
    """Prediction request as stored by the app."""
    return {
        "settings": {"cycle_length": 28, "period_length": 5},
        "history": [
            {"id": "e2", "start_date": "2024-01-29T00:00:00"},
            {"id": "e1", "start_date": "2024-01-01", "end_date": "2024-01-05"}
        ],
        "today": "2024-02-12"
    }

def _call(handler, body, context):
    response = handler({"body": json.dumps(body)}, context)
    return response["statusCode"], json.loads(response["body"])

def test_prediction(request_body, lambda_context):
    """Test a prediction on the projected ovulation day."""
    status, body = _call(prediction_handler, request_body, lambda_context)

    assert status == 200
    assert body["paused"] is False
    assert body["today"] == "2024-02-12"
    assert body["summary"]["next_period_window"] == {"start": "2024-02-26", "end": "2024-03-01"}
    assert body["summary"]["ovulation_date"] == "2024-02-12"
    assert body["summary"]["fertile_window"] == {"start": "2024-02-07", "end": "2024-02-13"}
    assert body["summary"]["current_period"] is None
    assert body["summary"]["phase_info"]["phase"] == "ovulation"
    assert body["summary"]["days_until_next_period"] == 14
    assert body["is_late"] is False
    assert body["cycle_progress"] == 50.0
    assert body["advice"]["nutrition"]
    assert body["accuracy"] == 85

def test_prediction_with_symptoms(request_body, lambda_context):
    """Test that logged symptoms personalize the advice."""
    request_body["symptom"] = {"date": "2024-02-12", "mood": "irritable", "pain": "light"}

    status, body = _call(prediction_handler, request_body, lambda_context)

    assert status == 200
    assert "Gentle stretching" in body["advice"]["wellness"]

def test_prediction_empty_history(lambda_context):
    """Test that an empty history is not an error."""
    status, body = _call(prediction_handler, {"today": "2024-02-12"}, lambda_context)

    assert status == 200
    assert body["summary"]["next_period_window"] is None
    assert body["summary"]["phase_info"]["phase"] == "unknown"
    assert body["summary"]["phase_info"]["day_label"] == "pending"
    assert body["cycle_progress"] is None

def test_prediction_pregnancy_mode(request_body, lambda_context):
    """Test that pregnancy mode pauses predictions."""
    request_body["settings"]["is_pregnancy_mode"] = True

    status, body = _call(prediction_handler, request_body, lambda_context)

    assert status == 200
    assert body["paused"] is True
    assert "summary" not in body

@pytest.mark.parametrize("body", [
    {"settings": {"cycle_length": 0, "period_length": 5}},
    {"settings": {"cycle_length": 28, "period_length": 30}},
    {"history": [{"id": "e1", "start_date": "2024-01-05", "end_date": "2024-01-01"}]},
    {"history": [{"id": "e1", "start_date": "someday"}]},
    {"today": "not a date"},
])
def test_prediction_invalid_request(body, lambda_context):
    """Test that malformed input is refused before reaching the engine."""
    status, payload = _call(prediction_handler, body, lambda_context)

    assert status == 400
    assert "error" in payload

def test_prediction_malformed_json(lambda_context):
    """Test that a body that is not JSON is refused."""
    response = prediction_handler({"body": "{not json"}, lambda_context)

    assert response["statusCode"] == 400

def test_calendar(request_body, lambda_context):
    """Test the month grid."""
    request_body.update({"year": 2024, "month": 2})

    status, body = _call(calendar_handler, request_body, lambda_context)

    assert status == 200
    assert body["paused"] is False
    assert len(body["days"]) == 29
    assert body["days"]["2024-02-01"] == "period"
    assert body["days"]["2024-02-12"] == "ovulation"
    assert body["days"]["2024-02-13"] == "fertile"
    assert body["days"]["2024-02-20"] == "safe"
    assert body["days"]["2024-02-26"] == "period"
    assert body["activity_days"] == {}

def test_calendar_marks_activity_days(request_body, lambda_context):
    """Test that logged activities inside the month are returned by day."""
    request_body.update({
        "year": 2024,
        "month": 2,
        "activities": [
            {"id": "a2", "date": "2024-02-14T21:00:00", "note": "evening"},
            {"id": "a1", "date": "2024-02-14"},
            {"id": "a3", "date": "2024-03-01"}
        ]
    })

    status, body = _call(calendar_handler, request_body, lambda_context)

    assert status == 200
    assert body["activity_days"] == {"2024-02-14": ["evening", None]}

def test_calendar_requires_month(request_body, lambda_context):
    """Test that the month is mandatory."""
    request_body.update({"year": 2024, "month": 13})

    status, _ = _call(calendar_handler, request_body, lambda_context)

    assert status == 400
