"""Structured JSON logging with request/payment context fields."""

import logging
import sys
from contextvars import ContextVar

from pythonjsonlogger.json import JsonFormatter

from payflow.common.config import settings


trace_id_ctx: ContextVar[str] = ContextVar("trace_id", default="")
payment_id_ctx: ContextVar[str] = ContextVar("payment_id", default="")


class ContextFilter(logging.Filter):
    """Inject service and correlation identifiers into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.service_name = settings.service_name
        record.trace_id = trace_id_ctx.get()
        record.payment_id = payment_id_ctx.get()
        return True


def configure_logging(level: str | None = None) -> None:
    """Configure root logger once per process."""

    handler = logging.StreamHandler(sys.stdout)
    context_filter = ContextFilter()
    handler.addFilter(context_filter)
    formatter = JsonFormatter(
        "%(asctime)s %(levelname)s %(service_name)s %(trace_id)s %(payment_id)s %(message)s"
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level or settings.log_level)
    root.addFilter(context_filter)


logger = logging.getLogger("payflow")
