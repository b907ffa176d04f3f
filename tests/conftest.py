"""Shared doubles and fixtures for processor tests."""

from decimal import Decimal

import pytest

from payflow.services.processor.receipts import ReceiptGenerator
from payflow.services.processor.repository import InMemoryPaymentRepository
from payflow.services.processor.schemas import PaymentRequest
from payflow.services.processor.service import PaymentProcessor
from payflow.services.processor.validator import PaymentValidator
from tests.fakes import FakeGateway, RecordingNotifier


@pytest.fixture
def payment_request() -> PaymentRequest:
    return PaymentRequest(
        user_id="user_123",
        user_email="john.doe@example.com",
        amount=Decimal("99.99"),
        currency="USD",
        payment_token="tok_visa_4242",
        description="Premium Subscription - Monthly",
    )


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def repository() -> InMemoryPaymentRepository:
    return InMemoryPaymentRepository()


@pytest.fixture
def processor(gateway, notifier, repository) -> PaymentProcessor:
    return PaymentProcessor(
        payment_gateway=gateway,
        notification_service=notifier,
        validator=PaymentValidator(),
        receipt_generator=ReceiptGenerator(),
        repository=repository,
        service_name="test-processor",
    )
