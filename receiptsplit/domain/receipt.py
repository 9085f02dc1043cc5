"""Data models for parsed receipts and split results."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Literal

# Where an item came from. "placeholder" items are fabricated so the
# assignment flow stays usable; callers can filter them out.
ItemProvenance = Literal["pattern", "salvaged", "structured", "placeholder"]


def new_item_id() -> str:
    """Generate a unique item ID."""
    return f"item_{uuid.uuid4().hex}"


@dataclass(frozen=True)
class LineItem:
    """A single line item on a receipt."""

    name: str
    total_price: Decimal
    quantity: int = 1
    unit_price: Decimal = Decimal("0")
    assignees: tuple[str, ...] = ()
    provenance: ItemProvenance = "pattern"
    id: str = field(default_factory=new_item_id, compare=False)

    @property
    def is_assigned(self) -> bool:
        return bool(self.assignees)

    def is_assigned_to(self, name: str) -> bool:
        return name in self.assignees

    @property
    def amount_per_person(self) -> Decimal:
        # total_price is authoritative; unit_price * quantity is informational only.
        if not self.assignees:
            return Decimal("0")
        return self.total_price / len(self.assignees)

    def with_assignee_toggled(self, name: str) -> LineItem:
        if name in self.assignees:
            return self.without_assignee(name)
        return replace(self, assignees=(*self.assignees, name))

    def without_assignee(self, name: str) -> LineItem:
        if name not in self.assignees:
            return self
        return replace(self, assignees=tuple(a for a in self.assignees if a != name))


@dataclass(frozen=True)
class PersonTotal:
    """Amount owed by one participant."""

    name: str
    amount: Decimal


@dataclass(frozen=True)
class ReceiptSummary:
    """Receipt-level aggregates."""

    total_amount: Decimal
    assigned_amount: Decimal
    unassigned_amount: Decimal
    total_items: int
    assigned_items: int
