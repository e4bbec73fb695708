"""Handler logger emitting one JSON record per line."""
import os
import json
import traceback
from aws_lambda_powertools import Logger

from cycle_engine.services.constants import DEFAULT_CYCLE_LENGTH, DEFAULT_PERIOD_LENGTH

def single_line_trace(error: BaseException) -> str:
    """Render an exception and its traceback joined with ' | '."""
    lines = traceback.format_exception(type(error), error, error.__traceback__)
    return " | ".join(line.rstrip("\n").replace("\n", " | ") for line in lines)

class SingleLineLogger(Logger):
    """Logger whose exception records carry the traceback in one field."""

    def exception(self, message, *args, **kwargs):
        error = kwargs.pop("error", None)
        extra = kwargs.pop("extra", {})
        if error is not None:
            extra["exception"] = single_line_trace(error)
        kwargs["exc_info"] = False
        self.error(message, *args, extra=extra, **kwargs)

logger = SingleLineLogger(
    service=os.environ.get("POWERTOOLS_SERVICE_NAME", "cycle_engine"),
    level=os.environ.get("LOG_LEVEL", "INFO"),
    json_serializer=json.dumps,
    use_rfc3339=True
)

# Defaults in effect for requests that omit settings
logger.append_keys(
    default_cycle_length=DEFAULT_CYCLE_LENGTH,
    default_period_length=DEFAULT_PERIOD_LENGTH
)
