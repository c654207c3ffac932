"""
Shared enumerations for database models.
"""

import enum


class Direction(str, enum.Enum):
    """Whether money left (given) or reached (received) the owner."""
    GIVEN = "given"
    RECEIVED = "received"
