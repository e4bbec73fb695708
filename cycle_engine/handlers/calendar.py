"""
Lambda handler for the monthly calendar grid.
"""
from typing import Dict

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from cycle_engine.models.request import CalendarRequest
from cycle_engine.services.activity import activities_in_month
from cycle_engine.services.engine import CycleEngine
from cycle_engine.utils.api import build_response, parse_body
from cycle_engine.utils.logging import logger

tracer = Tracer()

@logger.inject_lambda_context
@tracer.capture_lambda_handler
def handler(event: Dict, context: LambdaContext) -> Dict:
    """
    Handle calendar request.

    Args:
        event: API Gateway Lambda proxy event whose body holds settings,
            history, year, month and optional activity logs
        context: Lambda context

    Returns:
        API Gateway Lambda proxy response mapping each ISO day of the month
        to its classification, plus the days carrying activity logs
    """
    try:
        request = CalendarRequest.model_validate(parse_body(event))
    except ValueError as e:
        logger.warning("Invalid calendar request", extra={"error": str(e)})
        return build_response(400, {"error": str(e)})

    try:
        engine = CycleEngine(request.history, request.settings)
        grid = engine.classify_month(request.year, request.month)
        marked = activities_in_month(request.activities, request.year, request.month)

        return build_response(200, {
            "paused": engine.is_paused,
            "year": request.year,
            "month": request.month,
            "days": {day.isoformat(): day_type.value for day, day_type in grid.items()},
            "activity_days": {
                day.isoformat(): [log.note for log in logs] for day, logs in marked.items()
            }
        })

    except Exception as e:
        logger.exception("Error building calendar", error=e)
        return build_response(500, {"error": str(e)})
