"""Ordered line-shape patterns for receipt item lines.

Patterns are tried top to bottom and the first accepted match wins, so
the more specific multi-price shapes must stay ahead of the permissive
single-price ones.
"""

import re

from receiptsplit.domain.receipt import LineItem

from .common import clean_item_name, parse_amount

_NUMBER = r"\d+(?:[.,]\d+)?"
_CURRENCY_SUFFIX = r"(?:₼|AZN|man\.?|USD|EUR|\$|€|£)"
# Amount with optional currency before or after, e.g. "$10.00", "12,50 AZN", "3.00₼".
_AMOUNT = rf"(?:[$€£₼]\s?)?{_NUMBER}(?:\s?{_CURRENCY_SUFFIX})?"
# Amount that must carry a currency marker.
_CURRENCY_AMOUNT = rf"(?:[$€£₼]\s?{_NUMBER}|{_NUMBER}\s?{_CURRENCY_SUFFIX})"

ITEM_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    # "Kebab 2 10.00 20.00", "Fish x2 $10.00 $20.00"
    (
        "name_qty_unit_total",
        re.compile(rf"^(?P<name>.+?)\s+[x×]?(?P<qty>\d+)\s+(?P<unit>{_AMOUNT})\s+(?P<total>{_AMOUNT})$", re.IGNORECASE),
    ),
    # "2x Fish $10.00 ea $20.00"
    (
        "qty_x_name_unit_total",
        re.compile(
            rf"^(?P<qty>\d+)\s*[x×]\s*(?P<name>.+?)\s+(?P<unit>{_AMOUNT})\s+(?:ea\s+)?(?P<total>{_AMOUNT})$",
            re.IGNORECASE,
        ),
    ),
    # "Fish (2) $10.00 $20.00", "Dolma (3 pcs) 4.00 12.00"
    (
        "name_paren_qty_unit_total",
        re.compile(
            rf"^(?P<name>.+?)\s*\((?P<qty>\d+)\s*(?:pcs|pc|ədəd|əd)?\.?\)\s*(?P<unit>{_AMOUNT})\s+(?P<total>{_AMOUNT})$",
            re.IGNORECASE,
        ),
    ),
    # "Fish - 2 @ $10.00 = $20.00"
    (
        "name_qty_at_unit_eq_total",
        re.compile(
            rf"^(?P<name>.+?)\s*-\s*(?P<qty>\d+)\s*@\s*(?P<unit>{_AMOUNT})\s*=\s*(?P<total>{_AMOUNT})$",
            re.IGNORECASE,
        ),
    ),
    # "Water    12.50"
    (
        "name_spaced_total",
        re.compile(rf"^(?P<name>.+?)\s{{2,}}(?P<total>{_AMOUNT})$", re.IGNORECASE),
    ),
    # "3. Ayran 2.00"
    (
        "numbered_name_total",
        re.compile(rf"^\d{{1,3}}[.)]\s*(?P<name>.+?)\s+(?P<total>{_AMOUNT})$", re.IGNORECASE),
    ),
    # "Tea 3.00 AZN", "Tea $3.00", "Tea 3,00₼"
    (
        "name_currency_total",
        re.compile(rf"^(?P<name>.+?)\s*(?P<total>{_CURRENCY_AMOUNT})$", re.IGNORECASE),
    ),
)


def _item_from_match(match: re.Match[str]) -> LineItem | None:
    """Build an item from a structural match, or None if it fails acceptance."""
    groups = match.groupdict()
    name = clean_item_name(groups["name"])
    if not name:
        return None

    total_price = parse_amount(groups["total"])
    if total_price <= 0:
        return None

    if groups.get("qty") is None:
        # Single-price shapes: the one price is both unit and total.
        return LineItem(name=name, quantity=1, unit_price=total_price, total_price=total_price)

    quantity = int(groups["qty"])
    if quantity < 1:
        return None
    return LineItem(
        name=name,
        quantity=quantity,
        unit_price=parse_amount(groups["unit"]),
        total_price=total_price,
    )


def match_line_with_pattern(line: str) -> tuple[str, LineItem] | None:
    """Return (pattern name, item) for the first accepted structural match."""
    line = line.strip()
    for pattern_name, pattern in ITEM_PATTERNS:
        match = pattern.match(line)
        if match is None:
            continue
        item = _item_from_match(match)
        if item is not None:
            return pattern_name, item
    return None


def match_line(line: str) -> LineItem | None:
    """Return the first accepted structural match for a candidate line."""
    matched = match_line_with_pattern(line)
    return matched[1] if matched is not None else None
