"""Storage of payment outcomes.

Records are keyed by payment id and written once per validated attempt. The
in-memory store is the default backend; the SQL store keeps the same contract
on top of SQLAlchemy.
"""

import asyncio
import threading
from abc import ABC, abstractmethod

from sqlalchemy import func, select

from payflow.common.db import Base
from payflow.common.logging import logger
from payflow.services.processor.models import PaymentRecordRow
from payflow.services.processor.schemas import PaymentRecord, PaymentRequest


class PaymentRepository(ABC):
    """Keyed store of payment outcomes."""

    @abstractmethod
    async def save(
        self,
        payment_id: str,
        request: PaymentRequest,
        transaction_id: str | None,
        success: bool,
    ) -> None:
        """Upsert the record for `payment_id`."""

    @abstractmethod
    async def count(self) -> int:
        """Number of distinct payment ids saved, failures included."""

    @abstractmethod
    async def get(self, payment_id: str) -> PaymentRecord | None:
        """Return the stored record for `payment_id`, if any."""


def build_record(
    payment_id: str, request: PaymentRequest, transaction_id: str | None, success: bool
) -> PaymentRecord:
    return PaymentRecord(
        payment_id=payment_id,
        user_id=request.user_id,
        amount=request.amount,
        currency=request.currency,
        transaction_id=transaction_id,
        success=success,
    )


class InMemoryPaymentRepository(PaymentRepository):
    """Lock-guarded dict; safe across coroutines and worker threads."""

    def __init__(self) -> None:
        self._records: dict[str, PaymentRecord] = {}
        self._lock = threading.Lock()

    async def save(
        self,
        payment_id: str,
        request: PaymentRequest,
        transaction_id: str | None,
        success: bool,
    ) -> None:
        record = build_record(payment_id, request, transaction_id, success)
        with self._lock:
            self._records[payment_id] = record

    async def count(self) -> int:
        with self._lock:
            return len(self._records)

    async def get(self, payment_id: str) -> PaymentRecord | None:
        with self._lock:
            return self._records.get(payment_id)


class SqlPaymentRepository(PaymentRepository):
    """SQLAlchemy-backed repository.

    Session work is blocking, so each call runs in a worker thread to keep the
    event loop free while the database responds.
    """

    def __init__(self, session_factory, create_schema: bool = True) -> None:
        self.session_factory = session_factory
        if create_schema:
            Base.metadata.create_all(bind=session_factory.kw["bind"])

    def _save_sync(self, record: PaymentRecord) -> None:
        with self.session_factory() as db:
            db.merge(
                PaymentRecordRow(
                    payment_id=record.payment_id,
                    user_id=record.user_id,
                    amount=record.amount,
                    currency=record.currency,
                    transaction_id=record.transaction_id,
                    success=record.success,
                )
            )
            db.commit()
        logger.debug("payment_record_saved payment_id=%s success=%s", record.payment_id, record.success)

    def _count_sync(self) -> int:
        with self.session_factory() as db:
            return db.execute(select(func.count()).select_from(PaymentRecordRow)).scalar_one()

    def _get_sync(self, payment_id: str) -> PaymentRecord | None:
        with self.session_factory() as db:
            row = db.get(PaymentRecordRow, payment_id)
            if row is None:
                return None
            return PaymentRecord.model_validate(row)

    async def save(
        self,
        payment_id: str,
        request: PaymentRequest,
        transaction_id: str | None,
        success: bool,
    ) -> None:
        record = build_record(payment_id, request, transaction_id, success)
        await asyncio.to_thread(self._save_sync, record)

    async def count(self) -> int:
        return await asyncio.to_thread(self._count_sync)

    async def get(self, payment_id: str) -> PaymentRecord | None:
        return await asyncio.to_thread(self._get_sync, payment_id)
