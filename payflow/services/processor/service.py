"""Payment orchestration.

One `process_payment` call runs validate -> authorize -> persist -> receipt ->
notify and converts every failure mode into a `PaymentResult`. The record for
an attempt is always persisted before any notification about it is sent.
"""

import time
from uuid import uuid4

from opentelemetry import trace

from payflow.common.logging import logger, payment_id_ctx
from payflow.common.metrics import (
    gateway_latency_seconds,
    notifications_sent_total,
    payment_failure_total,
    payment_latency_seconds,
    payment_rejected_total,
    payment_requests_total,
    payment_success_total,
)
from payflow.services.processor.external import NotificationService, PaymentGateway
from payflow.services.processor.receipts import ReceiptGenerator
from payflow.services.processor.repository import PaymentRepository
from payflow.services.processor.schemas import PaymentRequest, PaymentResult
from payflow.services.processor.validator import PaymentValidator


SUBJECT_SUCCESS = "Payment Successful"
SUBJECT_FAILED = "Payment Failed"

tracer = trace.get_tracer(__name__)


def _require(value, name: str):
    if value is None:
        raise ValueError(f"{name} is required")
    return value


class PaymentProcessor:
    """Owns the request/response cycle of a single payment.

    Holds no per-call state; concurrent calls share only the repository.
    """

    def __init__(
        self,
        payment_gateway: PaymentGateway,
        notification_service: NotificationService,
        validator: PaymentValidator,
        receipt_generator: ReceiptGenerator,
        repository: PaymentRepository,
        enable_notifications: bool = True,
        service_name: str = "payment-processor",
    ) -> None:
        self.payment_gateway = _require(payment_gateway, "payment_gateway")
        self.notification_service = _require(notification_service, "notification_service")
        self.validator = _require(validator, "validator")
        self.receipt_generator = _require(receipt_generator, "receipt_generator")
        self.repository = _require(repository, "repository")
        self.enable_notifications = enable_notifications
        self.service_name = service_name

    async def _notify(self, recipient: str, subject: str, message: str) -> None:
        if not self.enable_notifications:
            logger.info("notification_skipped subject=%s reason=disabled", subject)
            return
        with tracer.start_as_current_span("notification.notify"):
            await self.notification_service.notify(recipient, subject, message)
        notifications_sent_total.labels(service=self.service_name, subject=subject).inc()

    def _failed(self, payment_id: str, message: str, failure_kind: str) -> PaymentResult:
        payment_failure_total.labels(service=self.service_name, failure_kind=failure_kind).inc()
        return PaymentResult(
            success=False,
            payment_id=payment_id,
            error_message=message,
            failure_kind=failure_kind,
        )

    async def process_payment(self, request: PaymentRequest | None) -> PaymentResult:
        """Run one payment through the full pipeline; never raises."""

        payment_requests_total.labels(service=self.service_name).inc()
        started = time.perf_counter()
        try:
            return await self._process(request)
        finally:
            payment_latency_seconds.labels(service=self.service_name).observe(time.perf_counter() - started)

    async def _process(self, request: PaymentRequest | None) -> PaymentResult:
        try:
            validation = self.validator.validate(request)
        except Exception as exc:
            # Nothing was authorized or assigned yet, so there is nothing to record.
            logger.exception("payment_validation_failed error=%s", exc)
            payment_failure_total.labels(service=self.service_name, failure_kind="error").inc()
            return PaymentResult(
                success=False,
                error_message=f"Payment processing failed: {exc}",
                failure_kind="error",
            )
        if not validation.is_valid:
            logger.info("payment_rejected reason=%s", validation.error_message)
            payment_rejected_total.labels(service=self.service_name).inc()
            return PaymentResult(
                success=False,
                error_message=validation.error_message,
                failure_kind="validation",
            )

        payment_id = uuid4().hex
        token = payment_id_ctx.set(payment_id)
        recorded = False
        try:
            logger.info("payment_authorizing amount=%s currency=%s", request.amount, request.currency)
            with tracer.start_as_current_span("gateway.authorize") as span:
                span.set_attribute("payment.id", payment_id)
                with gateway_latency_seconds.labels(service=self.service_name).time():
                    response = await self.payment_gateway.authorize(
                        request.amount,
                        request.currency,
                        request.payment_token,
                    )

            if not response.success:
                await self.repository.save(payment_id, request, response.transaction_id, False)
                recorded = True
                logger.warning("payment_declined reason=%s", response.error_message)
                await self._notify(
                    request.user_email,
                    SUBJECT_FAILED,
                    f"Your payment of {request.amount} {request.currency} failed: {response.error_message}",
                )
                return self._failed(payment_id, response.error_message, "declined")

            receipt = self.receipt_generator.generate(request, payment_id, response.transaction_id)
            await self.repository.save(payment_id, request, response.transaction_id, True)
            recorded = True
            logger.info("payment_succeeded transaction_id=%s", response.transaction_id)
            await self._notify(
                request.user_email,
                SUBJECT_SUCCESS,
                f"Your payment of {request.amount} {request.currency} was successful.\n\n"
                f"{receipt.formatted_receipt}",
            )
            payment_success_total.labels(service=self.service_name).inc()
            return PaymentResult(
                success=True,
                payment_id=payment_id,
                transaction_id=response.transaction_id,
                receipt=receipt,
            )
        except Exception as exc:
            logger.exception("payment_processing_failed recorded=%s error=%s", recorded, exc)
            if not recorded:
                try:
                    await self.repository.save(payment_id, request, None, False)
                except Exception as save_exc:
                    logger.error("payment_failure_record_lost error=%s", save_exc)
            return self._failed(payment_id, f"Payment processing failed: {exc}", "error")
        finally:
            payment_id_ctx.reset(token)

    async def get_total_processed(self) -> int:
        """Number of validated attempts persisted so far."""

        return await self.repository.count()
