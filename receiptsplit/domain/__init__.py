"""Core domain models for receiptsplit.

This package provides:
- LineItem, PersonTotal, ReceiptSummary: receipt and split models
- AssignmentLedger: participants and item assignments
- per_person_totals, receipt_summary: split calculation
- SessionState, Step, ExtractionResult: workflow state

Usage:
    from receiptsplit.domain import AssignmentLedger, LineItem, per_person_totals
"""

from receiptsplit.domain.ledger import AssignmentLedger
from receiptsplit.domain.receipt import ItemProvenance, LineItem, PersonTotal, ReceiptSummary, new_item_id
from receiptsplit.domain.session import (
    ExtractionResult,
    SessionState,
    Step,
    is_valid_participant_name,
    participant_name_error,
)
from receiptsplit.domain.split import per_person_totals, receipt_summary

__all__ = [
    "AssignmentLedger",
    "ExtractionResult",
    "ItemProvenance",
    "LineItem",
    "PersonTotal",
    "ReceiptSummary",
    "SessionState",
    "Step",
    "is_valid_participant_name",
    "new_item_id",
    "participant_name_error",
    "per_person_totals",
    "receipt_summary",
]
