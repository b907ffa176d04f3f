"""Construction of a ready-to-use `PaymentProcessor`.

Callers choose the gateway and notification channel; the remaining internal
collaborators are created here from configuration.
"""

from payflow.common.config import ProcessorSettings, settings
from payflow.common.db import make_session_factory
from payflow.common.logging import logger
from payflow.services.notification.service import EmailNotificationService
from payflow.services.processor.external import NotificationService, PaymentGateway
from payflow.services.processor.receipts import ReceiptGenerator
from payflow.services.processor.repository import (
    InMemoryPaymentRepository,
    PaymentRepository,
    SqlPaymentRepository,
)
from payflow.services.processor.service import PaymentProcessor
from payflow.services.processor.validator import PaymentValidator
from payflow.services.provider_adapter.service import SimulatedProviderGateway


def build_repository(config: ProcessorSettings) -> PaymentRepository:
    """Pick the repository backend named by `config.repository_backend`."""

    backend = config.repository_backend.lower()
    if backend == "memory":
        return InMemoryPaymentRepository()
    if backend == "sql":
        return SqlPaymentRepository(make_session_factory(config.database_dsn))
    raise ValueError(f"Unknown repository backend: {config.repository_backend}")


def build_processor(
    payment_gateway: PaymentGateway,
    notification_service: NotificationService,
    config: ProcessorSettings | None = None,
    repository: PaymentRepository | None = None,
) -> PaymentProcessor:
    """Wire a processor around the given external collaborators."""

    if payment_gateway is None:
        raise ValueError("payment_gateway is required")
    if notification_service is None:
        raise ValueError("notification_service is required")
    config = config or settings
    repository = repository or build_repository(config)
    logger.info(
        "processor_wired gateway=%s notifier=%s repository=%s notifications=%s",
        type(payment_gateway).__name__,
        type(notification_service).__name__,
        type(repository).__name__,
        config.enable_notifications,
    )
    return PaymentProcessor(
        payment_gateway=payment_gateway,
        notification_service=notification_service,
        validator=PaymentValidator(),
        receipt_generator=ReceiptGenerator(),
        repository=repository,
        enable_notifications=config.enable_notifications,
        service_name=config.service_name,
    )


def build_simulated_processor(config: ProcessorSettings | None = None) -> PaymentProcessor:
    """Processor backed by the simulated provider and email channel."""

    config = config or settings
    return build_processor(
        SimulatedProviderGateway(
            success_rate=config.gateway_success_rate,
            latency_seconds=config.gateway_latency_seconds,
        ),
        EmailNotificationService(latency_seconds=config.notification_latency_seconds),
        config=config,
    )
