from decimal import Decimal

import pytest

from receiptsplit.receipt.text_parser.cascade import ITEM_PATTERNS, match_line, match_line_with_pattern


def _fields(line: str) -> tuple[str, str, int, Decimal, Decimal]:
    matched = match_line_with_pattern(line)
    assert matched is not None, line
    pattern_name, item = matched
    return pattern_name, item.name, item.quantity, item.unit_price, item.total_price


def test_patterns_are_tried_in_fixed_order() -> None:
    assert [name for name, _ in ITEM_PATTERNS] == [
        "name_qty_unit_total",
        "qty_x_name_unit_total",
        "name_paren_qty_unit_total",
        "name_qty_at_unit_eq_total",
        "name_spaced_total",
        "numbered_name_total",
        "name_currency_total",
    ]


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("Kebab 2 10.00 20.00", ("name_qty_unit_total", "Kebab", 2, Decimal("10.00"), Decimal("20.00"))),
        ("Fish x2 $10.00 $20.00", ("name_qty_unit_total", "Fish", 2, Decimal("10.00"), Decimal("20.00"))),
        ("2x Fish $10.00 ea $20.00", ("qty_x_name_unit_total", "Fish", 2, Decimal("10.00"), Decimal("20.00"))),
        ("2x Lahmacun 4.00 8.00", ("qty_x_name_unit_total", "Lahmacun", 2, Decimal("4.00"), Decimal("8.00"))),
        ("Dolma (3 pcs) 4.00 12.00", ("name_paren_qty_unit_total", "Dolma", 3, Decimal("4.00"), Decimal("12.00"))),
        ("Ayran (3) 1.50 4.50", ("name_paren_qty_unit_total", "Ayran", 3, Decimal("1.50"), Decimal("4.50"))),
        ("Fish - 2 @ $10.00 = $20.00", ("name_qty_at_unit_eq_total", "Fish", 2, Decimal("10.00"), Decimal("20.00"))),
        ("Water    12.50", ("name_spaced_total", "Water", 1, Decimal("12.50"), Decimal("12.50"))),
        ("Çay  1,50", ("name_spaced_total", "Çay", 1, Decimal("1.50"), Decimal("1.50"))),
        ("3. Ayran 2.00", ("numbered_name_total", "Ayran", 1, Decimal("2.00"), Decimal("2.00"))),
        ("Tea 3.00 AZN", ("name_currency_total", "Tea", 1, Decimal("3.00"), Decimal("3.00"))),
        ("Tea $3.00", ("name_currency_total", "Tea", 1, Decimal("3.00"), Decimal("3.00"))),
    ],
)
def test_line_shapes(line: str, expected: tuple[str, str, int, Decimal, Decimal]) -> None:
    assert _fields(line) == expected


def test_matching_is_case_insensitive() -> None:
    assert _fields("Fish X2 $10.00 $20.00")[1:] == ("Fish", 2, Decimal("10.00"), Decimal("20.00"))


def test_surrounding_whitespace_is_ignored() -> None:
    assert _fields("   Kebab 2 10.00 20.00   ")[1] == "Kebab"


def test_matched_items_come_from_pattern_provenance() -> None:
    item = match_line("Kebab 2 10.00 20.00")
    assert item is not None
    assert item.provenance == "pattern"
    assert item.assignees == ()


def test_zero_total_is_rejected() -> None:
    assert match_line("Water    0.00") is None


def test_blank_name_is_rejected() -> None:
    assert match_line("-   12.50") is None


def test_rejected_match_falls_through_to_later_pattern() -> None:
    # Quantity 0 fails acceptance for the first shape; the spaced total still matches.
    pattern_name, name, quantity, _, total = _fields("Tea x0 3.00  3.00 AZN")
    assert pattern_name == "name_spaced_total"
    assert quantity == 1
    assert total == Decimal("3.00")
    assert name == "Tea x0 3.00"


@pytest.mark.parametrize(
    "line",
    [
        "Kebab 15.50",
        "Just some words",
        "12.50",
        "",
    ],
)
def test_unstructured_lines_do_not_match(line: str) -> None:
    assert match_line(line) is None
