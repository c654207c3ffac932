"""
PayNote error types.

Each error carries the HTTP status it maps to, so the API layer
can translate service failures without inspecting messages.
"""


class PayNoteError(Exception):
    """Base exception with a human-readable message."""

    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to API response format."""
        return {"detail": self.message}


class ValidationError(PayNoteError, ValueError):
    """Missing or malformed input: name, amount, direction, etc."""

    status_code = 400


class AuthenticationError(PayNoteError):
    """No active session, or bad credentials."""

    status_code = 401


class NotFoundError(PayNoteError):
    """
    Record absent or owned by a different account.

    Both cases produce the same error so that a record's
    existence never leaks across accounts.
    """

    status_code = 404


class InternalError(PayNoteError):
    """Persistence layer failure."""

    status_code = 500
