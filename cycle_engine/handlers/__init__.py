"""
Lambda handlers package for AWS Lambda functions.
"""
from .prediction import handler
from .calendar import handler as calendar_handler

__all__ = ["handler", "calendar_handler"]
