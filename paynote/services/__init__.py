"""Business logic services."""

from paynote.services.auth_service import AuthService
from paynote.services.transaction_service import TransactionService
from paynote.services.dashboard_service import DashboardService

__all__ = ["AuthService", "TransactionService", "DashboardService"]
