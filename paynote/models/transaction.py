"""
Transaction model.

A single payment note: money given to, or received from, a
named person. The person is not a separate entity; notes are
grouped by exact person_name when balances are derived.

The integer primary key stays internal. Clients only ever see
external_id, which is what every lookup goes through together
with owner_id.
"""

import uuid
from datetime import datetime

from sqlalchemy import (
    String, DateTime, BigInteger, ForeignKey,
    Enum as SAEnum, Uuid, Index, CheckConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from paynote.models.base import Base
from paynote.models.enums import Direction


class Transaction(Base):
    __tablename__ = "transactions"
    __table_args__ = (
        Index("ix_transactions_owner_person", "owner_id", "person_name"),
        CheckConstraint("amount >= 1", name="ck_transactions_amount_positive"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    external_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, unique=True, nullable=False, default=uuid.uuid4
    )
    owner_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"), nullable=False, index=True
    )
    person_name: Mapped[str] = mapped_column(String(255), nullable=False)
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    purpose: Mapped[str] = mapped_column(
        String(1000), nullable=False, default=""
    )
    direction: Mapped[Direction] = mapped_column(
        SAEnum(
            Direction,
            name="direction_enum",
            create_constraint=True,
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    owner: Mapped["User"] = relationship(back_populates="transactions")

    def __repr__(self) -> str:
        return (
            f"<Transaction {self.external_id} "
            f"{self.direction.value} {self.amount} ({self.person_name})>"
        )
