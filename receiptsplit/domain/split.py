"""Per-participant split calculation."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from receiptsplit.domain.receipt import LineItem, PersonTotal, ReceiptSummary


def per_person_totals(items: Iterable[LineItem]) -> list[PersonTotal]:
    """
    Divide each assigned item's total evenly among its assignees.

    Shares are not rounded to currency minor units here; rounding is a
    display concern. Unassigned items contribute nothing, and participants
    with no assigned items get no entry.
    """
    totals: dict[str, Decimal] = {}
    for item in items:
        if not item.assignees:
            continue
        share = item.amount_per_person
        for name in item.assignees:
            totals[name] = totals.get(name, Decimal("0")) + share

    return [PersonTotal(name=name, amount=amount) for name, amount in sorted(totals.items())]


def receipt_summary(items: Iterable[LineItem]) -> ReceiptSummary:
    items = list(items)
    total_amount = sum((item.total_price for item in items), Decimal("0"))
    assigned = [item for item in items if item.assignees]
    assigned_amount = sum((item.total_price for item in assigned), Decimal("0"))
    return ReceiptSummary(
        total_amount=total_amount,
        assigned_amount=assigned_amount,
        unassigned_amount=total_amount - assigned_amount,
        total_items=len(items),
        assigned_items=len(assigned),
    )
