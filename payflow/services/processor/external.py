"""Collaborator interfaces the processor consumes.

Deployments supply one implementation of each at construction time. The
simulated implementations live in `provider_adapter` and `notification`.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from payflow.services.processor.schemas import GatewayResponse


class PaymentGateway(ABC):
    """External authority that authorizes or declines a charge."""

    @abstractmethod
    async def authorize(self, amount: Decimal, currency: str, token: str) -> GatewayResponse:
        """Authorize a charge against an opaque payment token.

        A decline is reported through `GatewayResponse.success`; raising is
        reserved for unexpected faults (network errors, timeouts, defects).
        Must be safe to call concurrently.
        """


class NotificationService(ABC):
    """Delivery channel used to tell the payer about the outcome."""

    @abstractmethod
    async def notify(self, recipient: str, subject: str, message: str) -> None:
        """Deliver one message; the processor only awaits completion."""
