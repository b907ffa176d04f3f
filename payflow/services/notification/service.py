"""Simulated email channel for payer notifications."""

import asyncio
from dataclasses import dataclass

from payflow.common.logging import logger
from payflow.services.processor.external import NotificationService


@dataclass(frozen=True)
class SentEmail:
    recipient: str
    subject: str
    message: str


class EmailNotificationService(NotificationService):
    """Logs each message as if it had been mailed and keeps a local outbox."""

    def __init__(self, latency_seconds: float = 0.2) -> None:
        self.latency_seconds = latency_seconds
        self.outbox: list[SentEmail] = []

    async def notify(self, recipient: str, subject: str, message: str) -> None:
        logger.info("email_sending recipient=%s subject=%s", recipient, subject)
        await asyncio.sleep(self.latency_seconds)
        self.outbox.append(SentEmail(recipient=recipient, subject=subject, message=message))
        logger.info("email_sent recipient=%s subject=%s body=%s", recipient, subject, message)
