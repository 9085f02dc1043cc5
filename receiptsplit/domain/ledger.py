"""Participant and item assignment bookkeeping.

The ledger is immutable: every operation returns a new ledger and leaves
the original untouched. Invalid or unknown inputs are no-ops rather than
errors so UI actions can be replayed safely.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from receiptsplit.domain.receipt import LineItem


@dataclass(frozen=True)
class AssignmentLedger:
    """Participants plus receipt items with their assignees."""

    participants: tuple[str, ...] = ()
    items: tuple[LineItem, ...] = ()

    def item(self, item_id: str) -> LineItem | None:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def add_participant(self, name: str) -> AssignmentLedger:
        name = name.strip()
        if not name or name in self.participants:
            return self
        return replace(self, participants=(*self.participants, name))

    def remove_participant(self, name: str) -> AssignmentLedger:
        """Drop a participant and every assignment that references them."""
        if name not in self.participants and not any(item.is_assigned_to(name) for item in self.items):
            return self
        return replace(
            self,
            participants=tuple(p for p in self.participants if p != name),
            items=tuple(item.without_assignee(name) for item in self.items),
        )

    def toggle_assignment(self, item_id: str, name: str) -> AssignmentLedger:
        if self.item(item_id) is None:
            return self
        return replace(
            self,
            items=tuple(item.with_assignee_toggled(name) if item.id == item_id else item for item in self.items),
        )

    def replace_items(self, items: Iterable[LineItem]) -> AssignmentLedger:
        """Load a fresh set of items; any assignees they carry are cleared."""
        return replace(self, items=tuple(replace(item, assignees=()) for item in items))
