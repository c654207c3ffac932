"""
Dashboard service: the read views behind the dashboard and
person pages.

Fetches notes through TransactionService and runs them through
the aggregation functions. Nothing is cached; every call sees
the current state of the database.
"""

from sqlalchemy.orm import Session

from paynote.schemas.summary import DashboardResponse, PersonDetailResponse
from paynote.schemas.transaction import TransactionResponse
from paynote.services import aggregation
from paynote.services.transaction_service import TransactionService


class DashboardService:

    def __init__(self, db: Session):
        self.db = db
        self.transaction_service = TransactionService(db)

    def dashboard(
        self, owner_id: int, query: str | None = None
    ) -> DashboardResponse:
        """
        Recent notes plus totals.

        The search query narrows the recent notes, and the totals
        and both balance lists are computed over what remains.
        """
        recent = self.transaction_service.list_recent(owner_id)
        records = aggregation.filter_records(recent, query)
        groups = aggregation.group_by_counterparty(records)

        return DashboardResponse(
            transactions=[TransactionResponse.model_validate(r) for r in records],
            summary=aggregation.global_summary(records),
            owes_you=aggregation.owes_you(groups),
            you_owe=aggregation.you_owe(groups),
        )

    def person(self, owner_id: int, person_name: str) -> PersonDetailResponse:
        """Every note with one counterparty and their running balance."""
        records = self.transaction_service.list_by_counterparty(
            owner_id, person_name
        )
        return PersonDetailResponse(
            person_name=person_name,
            transactions=[TransactionResponse.model_validate(r) for r in records],
            summary=aggregation.person_summary(person_name, records),
        )
