"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from paynote.models.base import Base
from paynote.models.enums import Direction
from paynote.models.user import User
from paynote.models.transaction import Transaction

__all__ = [
    "Base",
    "Direction",
    "User",
    "Transaction",
]
