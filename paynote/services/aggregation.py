"""
Balance aggregation over payment notes.

Pure functions: no database access, no state. Anything with
person_name, amount and direction attributes can be passed in,
so the same code serves ORM rows and plain test objects.

Sign convention everywhere: received minus given. A positive
balance means money is owed to the owner.

Grouping is by exact person_name. "Ramesh" and "ramesh" are
two different counterparties.
"""

from collections.abc import Iterable, Sequence

from paynote.models.enums import Direction
from paynote.schemas.summary import (
    CounterpartyBalance,
    GlobalSummary,
    PersonSummary,
)


def _split_totals(records: Iterable) -> tuple[int, int, int]:
    """Return (total_given, total_received, count)."""
    total_given = 0
    total_received = 0
    count = 0
    for record in records:
        if record.direction == Direction.GIVEN:
            total_given += record.amount
        else:
            total_received += record.amount
        count += 1
    return total_given, total_received, count


def person_summary(name: str, records: Iterable) -> PersonSummary:
    """Totals for the notes of a single counterparty."""
    total_given, total_received, count = _split_totals(records)
    return PersonSummary(
        name=name,
        total_given=total_given,
        total_received=total_received,
        net_amount=total_received - total_given,
        count=count,
    )


def global_summary(records: Iterable) -> GlobalSummary:
    """Totals across every counterparty."""
    total_to_give, total_to_receive, _ = _split_totals(records)
    return GlobalSummary(
        total_to_receive=total_to_receive,
        total_to_give=total_to_give,
        net_balance=total_to_receive - total_to_give,
    )


def group_by_counterparty(records: Iterable) -> dict[str, PersonSummary]:
    """
    Partition notes by person_name and summarize each group.

    Groups keep the order in which each name first appears in
    the input. Every record lands in exactly one group.
    """
    groups: dict[str, list] = {}
    for record in records:
        groups.setdefault(record.person_name, []).append(record)

    return {
        name: person_summary(name, group)
        for name, group in groups.items()
    }


def owes_you(summaries: dict[str, PersonSummary]) -> list[CounterpartyBalance]:
    """Counterparties whose received total exceeds their given total."""
    return [
        CounterpartyBalance(
            name=s.name,
            amount=s.total_received - s.total_given,
            count=s.count,
        )
        for s in summaries.values()
        if s.total_received > s.total_given
    ]


def you_owe(summaries: dict[str, PersonSummary]) -> list[CounterpartyBalance]:
    """Counterparties whose given total exceeds their received total."""
    return [
        CounterpartyBalance(
            name=s.name,
            amount=s.total_given - s.total_received,
            count=s.count,
        )
        for s in summaries.values()
        if s.total_given > s.total_received
    ]


def filter_records(records: Sequence, query: str | None) -> list:
    """
    Case-insensitive substring search on person name or purpose.

    An empty or blank query keeps every record.
    """
    if not query or not query.strip():
        return list(records)

    needle = query.strip().lower()
    return [
        r for r in records
        if needle in r.person_name.lower()
        or (r.purpose and needle in r.purpose.lower())
    ]
