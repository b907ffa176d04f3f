"""Prometheus metric definitions for the payment processor."""

from prometheus_client import Counter, Histogram, generate_latest
from starlette.responses import Response


payment_requests_total = Counter("payment_requests_total", "Total payment requests", ["service"])
payment_rejected_total = Counter(
    "payment_rejected_total",
    "Payment requests rejected by input validation",
    ["service"],
)
payment_success_total = Counter("payment_success_total", "Total successful payments", ["service"])
payment_failure_total = Counter(
    "payment_failure_total",
    "Total failed payments after validation",
    ["service", "failure_kind"],
)
payment_latency_seconds = Histogram("payment_latency_seconds", "Payment latency seconds", ["service"])
gateway_latency_seconds = Histogram(
    "gateway_latency_seconds",
    "Gateway authorization call duration seconds",
    ["service"],
)
notifications_sent_total = Counter(
    "notifications_sent_total",
    "Notifications dispatched to payers",
    ["service", "subject"],
)
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["service", "route", "method", "status_code"],
)


def metrics_response() -> Response:
    """Expose all registered Prometheus metrics in text format."""

    return Response(content=generate_latest(), media_type="text/plain")
