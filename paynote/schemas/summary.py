"""
Pydantic schemas for derived balance views.

Nothing here is stored. Every value is recomputed from the
owner's notes on each request.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from paynote.schemas.transaction import TransactionResponse


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class PersonSummary(_CamelModel):
    """
    Totals for one counterparty.

    net_amount = total_received - total_given. Positive means
    the person owes the owner; negative means the owner owes
    the person.
    """
    name: str
    total_given: int = 0
    total_received: int = 0
    net_amount: int = 0
    count: int = 0


class GlobalSummary(_CamelModel):
    total_to_receive: int = 0
    total_to_give: int = 0
    net_balance: int = 0


class CounterpartyBalance(_CamelModel):
    """One row of the "owes you" or "you owe" list."""
    name: str
    amount: int
    count: int


class DashboardResponse(_CamelModel):
    transactions: list[TransactionResponse]
    summary: GlobalSummary
    owes_you: list[CounterpartyBalance]
    you_owe: list[CounterpartyBalance]


class PersonDetailResponse(_CamelModel):
    person_name: str
    transactions: list[TransactionResponse]
    summary: PersonSummary
