"""Bill-splitting session workflow.

``SplitSession`` is the entry point a presentation layer talks to. It owns
one immutable ``SessionState`` and swaps it for a new snapshot on every
action, so a UI can keep references to old states without seeing them
change underneath it.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import replace

from receiptsplit.domain.ledger import AssignmentLedger
from receiptsplit.domain.receipt import LineItem, PersonTotal, ReceiptSummary
from receiptsplit.domain.session import ExtractionResult, SessionState, Step, participant_name_error
from receiptsplit.domain.split import per_person_totals, receipt_summary
from receiptsplit.receipt.receipt_parser import parse_receipt_text
from receiptsplit.receipt.structured_response import parse_structured_response
from receiptsplit.runtime.logging import get_logger

logger = get_logger(__name__)

ReceiptExtractor = Callable[[bytes], ExtractionResult]

NO_ITEMS_MESSAGE = (
    "Couldn't find any items in the receipt. Please try:\n"
    "• Better lighting\n"
    "• Keep camera steady\n"
    "• Ensure entire receipt is in frame\n"
    "• Take closer shot of items section"
)


class SplitSession:
    """Single-writer controller around a SessionState snapshot."""

    def __init__(
        self,
        *,
        seed_placeholders: bool = True,
        extra_noise_keywords: Iterable[str] = (),
    ) -> None:
        self.seed_placeholders = seed_placeholders
        self.extra_noise_keywords = tuple(extra_noise_keywords)
        self._state = SessionState()

    @property
    def state(self) -> SessionState:
        return self._state

    def _set_ledger(self, ledger: AssignmentLedger) -> None:
        if ledger is not self._state.ledger:
            self._state = replace(self._state, ledger=ledger)

    # --- Participants ---

    def add_participant(self, name: str) -> str | None:
        """
        Add a participant after validating the name.

        Returns:
            A user-facing validation message, or None when the name was
            accepted (duplicates are accepted silently and ignored).
        """
        error = participant_name_error(name)
        if error is not None:
            logger.debug("Rejected participant name %r: %s", name, error)
            return error
        self._set_ledger(self._state.ledger.add_participant(name))
        logger.debug("Participants: %d", len(self._state.participants))
        return None

    def remove_participant(self, name: str) -> None:
        self._set_ledger(self._state.ledger.remove_participant(name))
        logger.debug("Participant removed: %s, remaining: %d", name, len(self._state.participants))

    # --- Items and assignments ---

    def toggle_assignment(self, item_id: str, name: str) -> None:
        self._set_ledger(self._state.ledger.toggle_assignment(item_id, name))
        logger.debug("Toggled assignment: %s on item %s", name, item_id)

    def load_items(self, items: Iterable[LineItem]) -> bool:
        """Replace the receipt items; move to ASSIGN if any were given."""
        ledger = self._state.ledger.replace_items(items)
        if not ledger.items:
            self._state = replace(
                self._state,
                ledger=ledger,
                is_processing=False,
                processing_status="",
                error_message=NO_ITEMS_MESSAGE,
            )
            return False

        self._state = replace(
            self._state,
            ledger=ledger,
            step=Step.ASSIGN,
            is_processing=False,
            processing_status="",
            error_message=None,
        )
        logger.info("Loaded %d receipt items", len(ledger.items))
        return True

    def load_structured_response(self, response_text: str) -> bool:
        """Load items from an AI extractor's JSON response, salvaging malformed ones."""
        items = parse_structured_response(response_text, seed_placeholders=self.seed_placeholders)
        return self.load_items(items)

    def load_text(self, text: str) -> bool:
        """Parse OCR text and load the resulting items."""
        items = parse_receipt_text(
            text,
            seed_placeholders=self.seed_placeholders,
            extra_noise_keywords=self.extra_noise_keywords,
        )
        return self.load_items(items)

    def process_receipt_image(self, image_bytes: bytes, extractor: ReceiptExtractor) -> bool:
        """
        Run an extractor over a receipt image and load what it returns.

        Extractor failures, including exceptions raised by the extractor,
        end up in ``state.error_message``; nothing is raised to the caller.
        """
        self._state = replace(
            self._state,
            is_processing=True,
            error_message=None,
            processing_status="Analyzing receipt...",
        )

        try:
            result = extractor(image_bytes)
        except Exception as exc:
            logger.exception("Receipt extractor raised")
            self._state = replace(
                self._state,
                is_processing=False,
                processing_status="",
                error_message=f"Error processing receipt: {exc}",
            )
            return False

        if result.status == "failed":
            logger.error("Receipt extraction failed: %s", result.error)
            self._state = replace(
                self._state,
                is_processing=False,
                processing_status="",
                error_message=f"Error processing receipt: {result.error or 'Unknown error'}",
            )
            return False

        if result.items is not None:
            return self.load_items(result.items)
        return self.load_text(result.text or "")

    # --- Results ---

    def person_totals(self) -> list[PersonTotal]:
        return per_person_totals(self._state.items)

    def summary(self) -> ReceiptSummary:
        return receipt_summary(self._state.items)

    # --- Navigation ---

    def go_to_step(self, step: Step) -> None:
        self._state = replace(self._state, step=step)
        logger.debug("Navigating to step: %s", step.name)

    def clear_error(self) -> None:
        self._state = replace(self._state, error_message=None)

    def reset(self) -> None:
        """Start over with a fresh, empty session."""
        self._state = SessionState()
        logger.debug("Session state reset")
