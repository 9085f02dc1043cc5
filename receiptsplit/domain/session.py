"""Session state for one bill-splitting workflow."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

from receiptsplit.domain.ledger import AssignmentLedger
from receiptsplit.domain.receipt import LineItem

PARTICIPANT_NAME_MIN_LENGTH = 2
PARTICIPANT_NAME_MAX_LENGTH = 20


class Step(Enum):
    """Navigation steps, in workflow order."""

    COLLECT_PARTICIPANTS = "collect_participants"
    CAPTURE = "capture"
    ASSIGN = "assign"
    RESULTS = "results"


@dataclass(frozen=True)
class SessionState:
    """Snapshot of the session; replaced wholesale on every change."""

    step: Step = Step.COLLECT_PARTICIPANTS
    ledger: AssignmentLedger = field(default_factory=AssignmentLedger)
    is_processing: bool = False
    error_message: str | None = None
    processing_status: str = ""

    @property
    def participants(self) -> tuple[str, ...]:
        return self.ledger.participants

    @property
    def items(self) -> tuple[LineItem, ...]:
        return self.ledger.items


ExtractionStatus = Literal["ok", "failed"]


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of handing a receipt image to an OCR/AI extractor."""

    status: ExtractionStatus
    text: str | None = None
    items: tuple[LineItem, ...] | None = None
    error: str | None = None


def participant_name_error(name: str) -> str | None:
    """Return a user-facing validation message, or None if the name is valid."""
    name = name.strip()
    if not name:
        return "Name cannot be empty"
    if len(name) < PARTICIPANT_NAME_MIN_LENGTH:
        return f"Name must be at least {PARTICIPANT_NAME_MIN_LENGTH} characters"
    if len(name) > PARTICIPANT_NAME_MAX_LENGTH:
        return f"Name cannot exceed {PARTICIPANT_NAME_MAX_LENGTH} characters"
    return None


def is_valid_participant_name(name: str) -> bool:
    return participant_name_error(name) is None
