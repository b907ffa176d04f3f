"""HTTP surface for payment processing."""

from fastapi import Depends, FastAPI, HTTPException, Request

from payflow.common.config import settings
from payflow.common.logging import configure_logging, trace_id_ctx
from payflow.common.metrics import http_requests_total, metrics_response
from payflow.common.startup import log_startup_config
from payflow.common.tracing import instrument_app, setup_tracing
from payflow.services.processor.schemas import PaymentRecord, PaymentRequest, PaymentResult, PaymentTotals
from payflow.services.processor.service import PaymentProcessor
from payflow.services.processor.wiring import build_simulated_processor

configure_logging()
setup_tracing(settings.service_name)
log_startup_config(
    settings,
    [
        "enable_notifications",
        "repository_backend",
        "database_dsn",
        "gateway_success_rate",
        "otel_exporter_otlp_endpoint",
    ],
)
processor = build_simulated_processor(settings)

app = FastAPI(title="PayFlow Payment Processor")
instrument_app(app)


def get_processor() -> PaymentProcessor:
    return processor


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    """Bind the caller's correlation id and count every HTTP call."""

    trace_token = trace_id_ctx.set(request.headers.get("x-correlation-id", ""))
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        route_obj = request.scope.get("route")
        route = getattr(route_obj, "path", request.url.path)
        http_requests_total.labels(
            service=settings.service_name,
            route=route,
            method=request.method,
            status_code=str(status_code),
        ).inc()
        trace_id_ctx.reset(trace_token)


@app.post("/payments", response_model=PaymentResult)
async def create_payment(req: PaymentRequest, processor: PaymentProcessor = Depends(get_processor)):
    """Process one payment.

    Input rejected by validation maps to 400; declines and faults are returned
    as a normal result with `success=false`.
    """

    result = await processor.process_payment(req)
    if result.failure_kind == "validation":
        raise HTTPException(status_code=400, detail=result.error_message)
    return result


@app.get("/payments/{payment_id}", response_model=PaymentRecord)
async def get_payment(payment_id: str, processor: PaymentProcessor = Depends(get_processor)):
    """Fetch the stored outcome of one payment attempt."""

    record = await processor.repository.get(payment_id)
    if record is None:
        raise HTTPException(status_code=404, detail="payment not found")
    return record


@app.get("/payments-stats", response_model=PaymentTotals)
async def payment_stats(processor: PaymentProcessor = Depends(get_processor)):
    return PaymentTotals(total_processed=await processor.get_total_processed())


@app.get("/metrics")
def metrics():
    """Prometheus scrape endpoint."""

    return metrics_response()


@app.get("/health")
def health():
    """Container health probe endpoint."""

    return {"ok": True}
