"""Receipt construction and text rendering for successful payments."""

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, localcontext
from uuid import uuid4

from payflow.services.processor.schemas import PaymentRequest, Receipt


RECEIPT_BANNER = "========== RECEIPT =========="
RECEIPT_FOOTER = "============================="
CENT = Decimal("0.01")


def format_amount(amount: Decimal) -> str:
    """Two decimals with thousands grouping, e.g. `1,234.50`; halves round up."""

    with localcontext() as ctx:
        # Room for every integer digit plus the two cents digits.
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return f"{amount.quantize(CENT, rounding=ROUND_HALF_UP):,.2f}"


def render_receipt(
    receipt_id: str,
    payment_id: str,
    transaction_id: str | None,
    amount: Decimal,
    currency: str | None,
    description: str | None,
    timestamp: datetime,
) -> str:
    """Render the receipt text block consumed by notification templates."""

    lines = [
        RECEIPT_BANNER,
        f"Receipt ID: {receipt_id}",
        f"Payment ID: {payment_id}",
        f"Transaction ID: {transaction_id or ''}",
        f"Amount: {format_amount(amount)} {currency or ''}",
        f"Description: {description or ''}",
        f"Date: {timestamp:%Y-%m-%d %H:%M:%S} UTC",
        RECEIPT_FOOTER,
    ]
    return "".join(f"{line}\n" for line in lines)


class ReceiptGenerator:
    """Builds one `Receipt` per successful gateway authorization."""

    def generate(self, request: PaymentRequest, payment_id: str, transaction_id: str | None) -> Receipt:
        receipt_id = uuid4().hex
        timestamp = datetime.now(timezone.utc)
        return Receipt(
            receipt_id=receipt_id,
            payment_id=payment_id,
            amount=request.amount,
            currency=request.currency,
            timestamp=timestamp,
            description=request.description,
            formatted_receipt=render_receipt(
                receipt_id,
                payment_id,
                transaction_id,
                request.amount,
                request.currency,
                request.description,
                timestamp,
            ),
        )
