"""
Lambda handler for today's cycle summary.
"""
from typing import Dict
from datetime import date

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from cycle_engine.models.request import PredictionRequest
from cycle_engine.services.advice import get_personalized_advice
from cycle_engine.services.engine import CycleEngine
from cycle_engine.utils.api import build_response, parse_body
from cycle_engine.utils.logging import logger

tracer = Tracer()

@logger.inject_lambda_context
@tracer.capture_lambda_handler
def handler(event: Dict, context: LambdaContext) -> Dict:
    """
    Handle prediction request.

    Args:
        event: API Gateway Lambda proxy event whose body holds settings,
            history, an optional reference day and optional symptoms
        context: Lambda context

    Returns:
        API Gateway Lambda proxy response
    """
    try:
        request = PredictionRequest.model_validate(parse_body(event))
    except ValueError as e:
        logger.warning("Invalid prediction request", extra={"error": str(e)})
        return build_response(400, {"error": str(e)})

    try:
        engine = CycleEngine(request.history, request.settings)
        today = request.today or date.today()
        accuracy = engine.accuracy()

        if engine.is_paused:
            return build_response(200, {
                "paused": True,
                "today": today,
                "accuracy": accuracy
            })

        summary = engine.summarize_today(today)
        advice = get_personalized_advice(summary.phase_info.phase, request.symptom)

        logger.info("Prediction computed", extra={
            "events": len(engine.snapshot),
            "phase": summary.phase_info.phase.value
        })

        return build_response(200, {
            "paused": False,
            "today": today,
            "summary": summary.model_dump(mode="json"),
            "is_late": summary.is_late,
            "cycle_progress": summary.cycle_progress(request.settings.cycle_length),
            "advice": advice.model_dump(),
            "accuracy": accuracy
        })

    except Exception as e:
        logger.exception("Error calculating prediction", error=e)
        return build_response(500, {"error": str(e)})
