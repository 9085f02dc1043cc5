"""Composable receipt text parser components."""

from .cascade import ITEM_PATTERNS, match_line, match_line_with_pattern
from .common import MAX_ITEMS, NOISE_KEYWORDS, clean_item_name, dedupe_key, fold_case, is_noise_line, parse_amount
from .fallback import (
    PLACEHOLDER_ITEMS,
    PLACEHOLDER_MIN_TEXT_LENGTH,
    fallback_items,
    placeholder_items,
    salvage_items,
)

__all__ = [
    "ITEM_PATTERNS",
    "MAX_ITEMS",
    "NOISE_KEYWORDS",
    "PLACEHOLDER_ITEMS",
    "PLACEHOLDER_MIN_TEXT_LENGTH",
    "clean_item_name",
    "dedupe_key",
    "fold_case",
    "fallback_items",
    "is_noise_line",
    "match_line",
    "match_line_with_pattern",
    "parse_amount",
    "placeholder_items",
    "salvage_items",
]
