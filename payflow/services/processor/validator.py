"""Input validation for payment requests.

Rules run in a fixed order and the first failing rule wins. Email and currency
are only checked for presence, not format.
"""

from payflow.services.processor.schemas import PaymentRequest, ValidationResult


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_payment_request(request: PaymentRequest | None) -> ValidationResult:
    """Return whether `request` may be sent to the gateway, and why not."""

    if request is None:
        return ValidationResult(is_valid=False, error_message="Payment request is null")
    if request.amount is None or request.amount <= 0:
        return ValidationResult(is_valid=False, error_message="Amount must be greater than zero")
    if _is_blank(request.currency):
        return ValidationResult(is_valid=False, error_message="Currency is required")
    if _is_blank(request.payment_token):
        return ValidationResult(is_valid=False, error_message="Payment token is required")
    if _is_blank(request.user_email):
        return ValidationResult(is_valid=False, error_message="User email is required")
    return ValidationResult(is_valid=True)


class PaymentValidator:
    """Injectable wrapper so the processor can be given a different rule set."""

    def validate(self, request: PaymentRequest | None) -> ValidationResult:
        return validate_payment_request(request)
