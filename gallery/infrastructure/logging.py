"""
Logging configuration for the gallery handlers.

Structured JSON output to stdout (picked up by CloudWatch) with the
API Gateway and Lambda request ids merged into every event.
"""

import logging
import sys
import time

import structlog


def configure_logging(service_name: str, level: str = "INFO") -> None:
    """
    Configure structured logging for a service.

    Args:
        service_name: Name of the service for log context
        level: Minimum stdlib log level name
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _add_service_name(service_name),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def _add_service_name(service_name: str):
    """Processor to add service name to all logs."""

    def processor(logger, method_name, event_dict):
        event_dict["service"] = service_name
        return event_dict

    return processor


def bind_request_ids(event: dict, context) -> None:
    """Bind the gateway and Lambda request ids for the current invocation."""
    structlog.contextvars.clear_contextvars()
    api_request_id = (event.get("requestContext") or {}).get("requestId", "")
    lambda_request_id = getattr(context, "aws_request_id", "")
    structlog.contextvars.bind_contextvars(
        api_request_id=api_request_id,
        lambda_request_id=lambda_request_id,
    )


class Timer:
    """
    Context manager for timing operations.

    Usage:
        with Timer() as t:
            table.put_item(Item=item)
        logger.info("Item written", duration_ms=t.duration_ms)
    """

    def __init__(self):
        self._start: float = 0
        self._end: float = 0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        self._end = time.perf_counter()

    @property
    def duration_ms(self) -> float:
        """Duration in milliseconds, rounded to 2 decimal places."""
        return round((self._end - self._start) * 1000, 2)
