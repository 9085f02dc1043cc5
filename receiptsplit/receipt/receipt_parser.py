"""Turn raw OCR text into receipt line items."""

from collections.abc import Iterable
from decimal import Decimal

from receiptsplit.domain.receipt import LineItem
from receiptsplit.runtime.logging import get_logger

from .text_parser import MAX_ITEMS, dedupe_key, fallback_items, is_noise_line, match_line_with_pattern

logger = get_logger(__name__)


def dedupe_items(items: Iterable[LineItem]) -> list[LineItem]:
    """Keep the first item per (normalized name, total price), preserving order."""
    seen: set[tuple[str, Decimal]] = set()
    unique: list[LineItem] = []
    for item in items:
        key = dedupe_key(item.name, item.total_price)
        if key in seen:
            continue
        seen.add(key)
        unique.append(item)
    return unique


def extract_pattern_items(lines: Iterable[str], extra_noise_keywords: Iterable[str] = ()) -> list[LineItem]:
    """Classify and match each line independently; no fallback."""
    extra_noise_keywords = tuple(extra_noise_keywords)
    items: list[LineItem] = []
    for raw_line in lines:
        line = raw_line.strip()
        if not line or is_noise_line(line, extra_noise_keywords):
            continue
        matched = match_line_with_pattern(line)
        if matched is None:
            continue
        pattern_name, item = matched
        logger.debug("Matched %s: %r -> %s x%d = %s", pattern_name, line, item.name, item.quantity, item.total_price)
        items.append(item)
    return items


def parse_receipt_text(
    text: str,
    *,
    seed_placeholders: bool = True,
    extra_noise_keywords: Iterable[str] = (),
) -> list[LineItem]:
    """
    Parse OCR text into line items.

    Runs the pattern cascade over every candidate line, drops duplicates,
    and only when nothing matched falls back to line salvage and then
    placeholder seeding. Never raises; blank text yields an empty list.

    Args:
        text: Newline-delimited OCR text
        seed_placeholders: Allow generic placeholder items as the last resort
        extra_noise_keywords: Additional lowercase denylist keywords
    """
    if not text or not text.strip():
        return []

    extra_noise_keywords = tuple(extra_noise_keywords)
    lines = text.splitlines()

    items = dedupe_items(extract_pattern_items(lines, extra_noise_keywords))
    if items:
        logger.debug("Pattern cascade produced %d items from %d lines", len(items), len(lines))
        return items[:MAX_ITEMS]

    logger.info("No structured item lines found; trying fallback extraction")
    items = fallback_items(
        "\n".join(lines),
        seed_placeholders=seed_placeholders,
        extra_noise_keywords=extra_noise_keywords,
    )
    return dedupe_items(items)[:MAX_ITEMS]
