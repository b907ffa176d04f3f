"""Data contracts exchanged between the processor, its collaborators and callers."""

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, model_validator


FailureKind = Literal["validation", "declined", "error"]


class PaymentRequest(BaseModel):
    """Payment submitted by a caller.

    Fields are deliberately unconstrained: malformed input is reported by the
    validator as a failed result rather than rejected at construction.
    """

    model_config = ConfigDict(frozen=True)

    user_id: str | None = None
    user_email: str | None = None
    amount: Decimal = Decimal("0")
    currency: str | None = None
    payment_token: str | None = None
    description: str | None = None


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    error_message: str | None = None


class GatewayResponse(BaseModel):
    """Outcome of one gateway authorization.

    An approval must name its transaction and a decline must say why. A
    decline may still carry the provider's transaction id.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    transaction_id: str | None = None
    error_message: str | None = None

    @model_validator(mode="after")
    def check_outcome_fields(self) -> "GatewayResponse":
        if self.success and not self.transaction_id:
            raise ValueError("approved gateway response requires a transaction_id")
        if not self.success and not self.error_message:
            raise ValueError("declined gateway response requires an error_message")
        return self


class Receipt(BaseModel):
    """Immutable record and text rendering of a successful payment."""

    model_config = ConfigDict(frozen=True)

    receipt_id: str
    payment_id: str
    amount: Decimal
    currency: str
    timestamp: datetime
    description: str | None = None
    formatted_receipt: str


class PaymentResult(BaseModel):
    """Uniform response returned by `PaymentProcessor.process_payment`."""

    model_config = ConfigDict(frozen=True)

    success: bool
    payment_id: str | None = None
    transaction_id: str | None = None
    receipt: Receipt | None = None
    error_message: str | None = None
    failure_kind: FailureKind | None = None


class PaymentRecord(BaseModel):
    """Persisted outcome of one validated payment attempt."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    payment_id: str
    user_id: str | None = None
    amount: Decimal
    currency: str | None = None
    transaction_id: str | None = None
    success: bool


class PaymentTotals(BaseModel):
    total_processed: int
