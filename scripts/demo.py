"""Console walkthrough: two payments through the simulated provider."""

import argparse
import asyncio
from decimal import Decimal

from payflow.common.config import ProcessorSettings
from payflow.common.logging import configure_logging
from payflow.services.processor.schemas import PaymentRequest, PaymentResult
from payflow.services.processor.wiring import build_simulated_processor


def display_result(result: PaymentResult) -> None:
    print("\n--- Payment Result ---")
    print(f"Success: {result.success}")
    print(f"Payment ID: {result.payment_id}")
    if result.success:
        print(f"Transaction ID: {result.transaction_id}")
        print(f"\n{result.receipt.formatted_receipt}")
    else:
        print(f"Error: {result.error_message}")


async def run(config: ProcessorSettings) -> None:
    processor = build_simulated_processor(config)
    requests = [
        PaymentRequest(
            user_id="user_123",
            user_email="john.doe@example.com",
            amount=Decimal("99.99"),
            currency="USD",
            payment_token="tok_visa_4242",
            description="Premium Subscription - Monthly",
        ),
        PaymentRequest(
            user_id="user_456",
            user_email="jane.smith@example.com",
            amount=Decimal("49.99"),
            currency="USD",
            payment_token="tok_visa_5555",
            description="Basic Subscription - Monthly",
        ),
    ]

    print("=== Payment Processing Demo ===\n")
    print("=" * 50)
    for idx, request in enumerate(requests, start=1):
        print(f"\nProcessing Payment #{idx}...")
        display_result(await processor.process_payment(request))

    total = await processor.get_total_processed()
    print("\n" + "=" * 50)
    print(f"Total payments processed: {total}")
    print("=" * 50)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run the payment processing demo.")
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument("--success-rate", type=float, default=0.9)
    args = parser.parse_args()
    configure_logging(args.log_level)
    asyncio.run(run(ProcessorSettings(gateway_success_rate=args.success_rate)))
