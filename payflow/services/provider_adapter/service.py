"""Simulated card provider used for demos and local runs.

Outcomes are random with a configurable success rate. Token prefixes force
deterministic outcomes for manual testing.
"""

import asyncio
import random
from decimal import Decimal
from uuid import uuid4

from payflow.common.logging import logger
from payflow.services.processor.external import PaymentGateway
from payflow.services.processor.schemas import GatewayResponse


FORCE_DECLINE_PREFIX = "tok_force_decline"
FORCE_TIMEOUT_PREFIX = "tok_force_timeout"
DECLINE_MESSAGE = "Payment declined by bank"


class ProviderTimeoutError(Exception):
    """Simulated provider did not answer in time."""


class SimulatedProviderGateway(PaymentGateway):
    """Stands in for a hosted card processor."""

    def __init__(
        self,
        success_rate: float = 0.9,
        latency_seconds: float = 0.5,
        rng: random.Random | None = None,
    ) -> None:
        if not 0.0 <= success_rate <= 1.0:
            raise ValueError("success_rate must be between 0 and 1")
        self.success_rate = success_rate
        self.latency_seconds = latency_seconds
        self.rng = rng or random.Random()

    def _pick_outcome(self, token: str) -> str:
        lowered = token.lower()
        if lowered.startswith(FORCE_TIMEOUT_PREFIX):
            return "TIMEOUT"
        if lowered.startswith(FORCE_DECLINE_PREFIX):
            return "DECLINE"
        return self.rng.choices(
            population=["SUCCESS", "DECLINE"],
            weights=[self.success_rate, 1.0 - self.success_rate],
            k=1,
        )[0]

    async def authorize(self, amount: Decimal, currency: str, token: str) -> GatewayResponse:
        # Only a token prefix is logged; the token itself is a credential reference.
        logger.info("provider_authorize amount=%s currency=%s token_prefix=%s", amount, currency, token[:8])
        await asyncio.sleep(self.latency_seconds)

        outcome = self._pick_outcome(token)
        if outcome == "TIMEOUT":
            logger.warning("provider_timeout after_s=%s", self.latency_seconds)
            raise ProviderTimeoutError("provider did not respond in time")
        if outcome == "DECLINE":
            logger.info("provider_declined reason=%s", DECLINE_MESSAGE)
            return GatewayResponse(success=False, error_message=DECLINE_MESSAGE)

        transaction_id = f"stripe_txn_{uuid4().hex[:12]}"
        logger.info("provider_authorized transaction_id=%s", transaction_id)
        return GatewayResponse(success=True, transaction_id=transaction_id)
