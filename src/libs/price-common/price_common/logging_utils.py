# src/libs/price-common/price_common/logging_utils.py
import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Optional, TextIO

from pythonjsonlogger import jsonlogger

from .config import SERVICE_NAME, ENVIRONMENT, LOG_LEVEL

NOT_SET = "<not-set>"

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default=NOT_SET)
request_id_var: ContextVar[str] = ContextVar("request_id", default=NOT_SET)
trace_id_var: ContextVar[str] = ContextVar("trace_id", default=NOT_SET)

# Log record attribute -> variable holding its value for the request being served.
REQUEST_CONTEXT = {
    "correlation_id": correlation_id_var,
    "request_id": request_id_var,
    "trace_id": trace_id_var,
}

LOG_FIELDS = ("asctime", "name", "levelname", "message", "service", "environment", *REQUEST_CONTEXT)
RENAMED_FIELDS = {"asctime": "timestamp", "levelname": "level", "name": "logger"}


class CorrelationIdFilter(logging.Filter):
    """Stamps each record with the service identity and the current request ids."""

    def filter(self, record: logging.LogRecord) -> bool:
        for attribute, var in REQUEST_CONTEXT.items():
            setattr(record, attribute, var.get())
        record.service = SERVICE_NAME
        record.environment = ENVIRONMENT
        return True


def build_json_handler(stream: Optional[TextIO] = None) -> logging.Handler:
    """
    Builds a stream handler that writes one JSON object per record, with the
    request ids attached. Writes to stdout unless another stream is given.
    """
    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            " ".join(f"%({field})s" for field in LOG_FIELDS),
            rename_fields=RENAMED_FIELDS,
        )
    )
    handler.addFilter(CorrelationIdFilter())
    return handler


def setup_logging(level: str = LOG_LEVEL) -> None:
    """
    Sends everything logged under the root logger to a single JSON handler.
    Calling it again replaces the handler instead of adding a second one.
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    root_logger.addHandler(build_json_handler())


def generate_correlation_id(prefix: str) -> str:
    """Returns '<prefix>:<uuid4>', e.g. 'PRC:1b4e28ba-2fa1-11d2-883f-0016d3cca427'."""
    return f"{prefix}:{uuid.uuid4()}"
