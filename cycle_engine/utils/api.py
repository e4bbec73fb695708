"""
Helpers for API Gateway Lambda proxy events.
"""
import json
from typing import Any, Dict

def parse_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Extract the JSON body of a proxy event.

    Args:
        event: API Gateway Lambda proxy event

    Returns:
        Parsed body, empty when the event has none

    Raises:
        ValueError: If the body is not a JSON object
    """
    body = event.get("body") or {}
    if isinstance(body, str):
        body = json.loads(body)
    if not isinstance(body, dict):
        raise ValueError("Request body must be a JSON object")
    return body

def build_response(status_code: int, payload: Dict[str, Any]) -> Dict[str, Any]:
    """Build a proxy response with a JSON body."""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(payload, default=str)
    }
