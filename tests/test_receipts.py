"""Receipt rendering must stay byte-compatible with existing consumers."""

from datetime import datetime, timezone
from decimal import Decimal

from payflow.services.processor.receipts import ReceiptGenerator, format_amount, render_receipt


def test_render_receipt_template():
    text = render_receipt(
        receipt_id="r1",
        payment_id="p1",
        transaction_id="stripe_txn_abc123",
        amount=Decimal("99.99"),
        currency="USD",
        description="Premium Subscription - Monthly",
        timestamp=datetime(2024, 3, 5, 7, 8, 9, tzinfo=timezone.utc),
    )

    assert text == (
        "========== RECEIPT ==========\n"
        "Receipt ID: r1\n"
        "Payment ID: p1\n"
        "Transaction ID: stripe_txn_abc123\n"
        "Amount: 99.99 USD\n"
        "Description: Premium Subscription - Monthly\n"
        "Date: 2024-03-05 07:08:09 UTC\n"
        "=============================\n"
    )


def test_format_amount_rounds_and_groups():
    assert format_amount(Decimal("5")) == "5.00"
    assert format_amount(Decimal("1234.5")) == "1,234.50"
    assert format_amount(Decimal("0.125")) == "0.13"
    assert format_amount(Decimal("1000000")) == "1,000,000.00"
    assert format_amount(Decimal("1e30")) == "1," + ",".join(["000"] * 10) + ".00"
    assert format_amount(Decimal("123456789012345678901234567890.125")) == (
        "123,456,789,012,345,678,901,234,567,890.13"
    )


def test_generate_receipt(payment_request):
    before = datetime.now(timezone.utc)
    receipt = ReceiptGenerator().generate(payment_request, "pay123", "stripe_txn_abc123")

    assert len(receipt.receipt_id) == 32
    assert receipt.payment_id == "pay123"
    assert receipt.amount == Decimal("99.99")
    assert receipt.currency == "USD"
    assert receipt.description == "Premium Subscription - Monthly"
    assert receipt.timestamp >= before
    assert receipt.timestamp.tzinfo is not None
    assert f"Receipt ID: {receipt.receipt_id}\n" in receipt.formatted_receipt
    assert "Payment ID: pay123\n" in receipt.formatted_receipt
    assert "Amount: 99.99 USD\n" in receipt.formatted_receipt
    assert f"Date: {receipt.timestamp:%Y-%m-%d %H:%M:%S} UTC\n" in receipt.formatted_receipt


def test_receipt_ids_are_unique(payment_request):
    generator = ReceiptGenerator()

    ids = {generator.generate(payment_request, "p", "t").receipt_id for _ in range(50)}

    assert len(ids) == 50


def test_missing_description_renders_empty(payment_request):
    request = payment_request.model_copy(update={"description": None})

    receipt = ReceiptGenerator().generate(request, "p", "t")

    assert "Description: \n" in receipt.formatted_receipt
