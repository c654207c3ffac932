"""
Transaction service: create, read, update and delete payment notes.

Every method takes the owner's id explicitly. Lookups always
filter on owner_id together with the record id, so a note that
belongs to someone else behaves exactly like a missing one.

The caller controls the commit. Methods only flush.
"""

import uuid
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from paynote.config import get_settings
from paynote.errors import InternalError, NotFoundError
from paynote.logging_setup import get_logger
from paynote.models.transaction import Transaction
from paynote.schemas.transaction import TransactionWrite
from paynote.services.validation import (
    clean_person_name,
    clean_purpose,
    parse_amount,
    parse_direction,
)

logger = get_logger(__name__)


def _parse_id(transaction_id) -> uuid.UUID | None:
    if isinstance(transaction_id, uuid.UUID):
        return transaction_id
    try:
        return uuid.UUID(str(transaction_id))
    except ValueError:
        return None


class TransactionService:

    def __init__(self, db: Session):
        self.db = db

    def _clean(self, request: TransactionWrite) -> dict:
        """Validate a request body into the four stored business fields."""
        return {
            "person_name": clean_person_name(request.person_name),
            "amount": parse_amount(request.amount),
            "purpose": clean_purpose(request.purpose),
            "direction": parse_direction(request.direction),
        }

    def _flush(self) -> None:
        try:
            self.db.flush()
        except SQLAlchemyError as e:
            logger.exception("Database error while saving transaction")
            raise InternalError("Could not save transaction") from e

    def create(self, owner_id: int, request: TransactionWrite) -> Transaction:
        """
        Record a new payment note for owner_id.

        Validation happens before anything is added to the
        session, so a rejected request leaves no trace.
        """
        fields = self._clean(request)

        txn = Transaction(owner_id=owner_id, **fields)
        self.db.add(txn)
        self._flush()

        logger.info(
            "Created transaction %s for owner %s", txn.external_id, owner_id
        )
        return txn

    def get(self, transaction_id, owner_id: int) -> Transaction:
        """Get one of owner_id's notes by its public id."""
        external_id = _parse_id(transaction_id)
        txn = None
        if external_id is not None:
            txn = self.db.execute(
                select(Transaction).where(
                    Transaction.external_id == external_id,
                    Transaction.owner_id == owner_id,
                )
            ).scalar_one_or_none()

        if not txn:
            raise NotFoundError("Transaction not found")
        return txn

    def list_for_owner(
        self, owner_id: int, limit: int | None = None
    ) -> list[Transaction]:
        """Return owner_id's notes, newest first. No limit when limit is None."""
        query = (
            select(Transaction)
            .where(Transaction.owner_id == owner_id)
            .order_by(Transaction.created_at.desc(), Transaction.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return list(self.db.execute(query).scalars().all())

    def list_recent(self, owner_id: int) -> list[Transaction]:
        """The dashboard page: the most recent notes only."""
        return self.list_for_owner(
            owner_id, limit=get_settings().DASHBOARD_PAGE_SIZE
        )

    def list_by_counterparty(
        self, owner_id: int, person_name: str
    ) -> list[Transaction]:
        """All of owner_id's notes with exactly this person name, newest first."""
        entries = self.db.execute(
            select(Transaction)
            .where(
                Transaction.owner_id == owner_id,
                Transaction.person_name == person_name,
            )
            .order_by(Transaction.created_at.desc(), Transaction.id.desc())
        ).scalars().all()
        return list(entries)

    def update(
        self, transaction_id, owner_id: int, request: TransactionWrite
    ) -> Transaction:
        """
        Replace all four business fields of an existing note.

        Ownership is checked first: an unknown or foreign id is
        reported as not found even when the body is also invalid.
        """
        txn = self.get(transaction_id, owner_id)
        fields = self._clean(request)

        for name, value in fields.items():
            setattr(txn, name, value)
        txn.updated_at = datetime.utcnow()
        self._flush()

        logger.info(
            "Updated transaction %s for owner %s", txn.external_id, owner_id
        )
        return txn

    def delete(self, transaction_id, owner_id: int) -> None:
        """Permanently remove one of owner_id's notes."""
        txn = self.get(transaction_id, owner_id)
        self.db.delete(txn)
        self._flush()

        logger.info(
            "Deleted transaction %s for owner %s", txn.external_id, owner_id
        )
