"""Application workflows."""

from receiptsplit.application.session import NO_ITEMS_MESSAGE, ReceiptExtractor, SplitSession

__all__ = [
    "NO_ITEMS_MESSAGE",
    "ReceiptExtractor",
    "SplitSession",
]
