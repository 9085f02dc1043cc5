"""Shared constants and helpers for receipt text parsing."""

import re
from collections.abc import Iterable
from decimal import Decimal, InvalidOperation

# Cap on items returned from one parse, bounds output for adversarial input.
MAX_ITEMS = 10

# Lines shorter than this are never items.
MIN_LINE_LENGTH = 3

# Substring denylist, matched against the case-folded line. English and
# Azerbaijani receipts. Short ambiguous words ("table", "tip", "card", "cash",
# "vat", "kart", "masa") only appear in longer forms because bare forms hit
# real dish names ("vegetable", "antipasto", "cardamom", "cashew",
# "cavatappi", "kartof", "masala").
NOISE_KEYWORDS: tuple[str, ...] = (
    # Totals and tax
    "subtotal",
    "sub total",
    "total",
    "tax",
    "vat ",
    "vat:",
    "vat%",
    "tip:",
    "tip ",
    "tips:",
    "gratuity",
    "service charge",
    "discount",
    "balance",
    "cəmi",
    "yekun",
    "ümumi",
    "məbləğ",
    "vergi",
    "ədv",
    "vöen",
    "endirim",
    "xidmət haqqı",
    # Payment
    "change",
    "cash:",
    "cash tendered",
    "card:",
    "credit card",
    "debit card",
    "card no",
    "card #",
    "visa",
    "mastercard",
    "payment",
    "paid",
    "nağd",
    "bank kartı",
    "kart ilə",
    "ödəniş",
    "qalıq",
    # Receipt metadata
    "receipt",
    "invoice",
    "date",
    "time",
    "order",
    "cashier",
    "server",
    "waiter",
    "table no",
    "table:",
    "table #",
    "çek",
    "qəbz",
    "kassa",
    "kassir",
    "tarix",
    "saat",
    "sifariş",
    "ofisiant",
    "masa:",
    "masa №",
    "masa no",
    # Address and contact
    "address",
    "phone",
    "tel:",
    "www.",
    "http",
    "ünvan",
    "telefon",
    # Marketing boilerplate
    "thank",
    "visit",
    "welcome",
    "təşəkkür",
    "xoş gəlmisiniz",
)

_LEADING_LIST_NUMBER = re.compile(r"^\s*(?:\d{1,3}[.)]\s+|[*•·\-]+\s*)")
_TRAILING_SEPARATORS = re.compile(r"[\s\-–—:=@.,*]+$")
_WHITESPACE = re.compile(r"\s+")


def parse_amount(token: str | None) -> Decimal:
    """
    Best-effort conversion of a price token to a non-negative Decimal.

    Commas are treated as decimal separators, then everything except digits
    and periods is dropped. Unparseable tokens map to 0 instead of raising.
    """
    if not token:
        return Decimal("0")
    cleaned = re.sub(r"[^\d.]", "", token.replace(",", "."))
    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        return Decimal("0")
    return amount


def fold_case(text: str) -> str:
    """Lowercase for keyword matching; "İ" folds to plain "i", not "i" plus a combining dot."""
    return text.lower().replace("i\u0307", "i")


def is_noise_line(line: str, extra_keywords: Iterable[str] = ()) -> bool:
    """Return True if a trimmed line should be skipped as a non-item line."""
    if len(line) < MIN_LINE_LENGTH:
        return True
    if not any(ch.isalpha() for ch in line):
        return True
    folded = fold_case(line)
    if any(keyword in folded for keyword in NOISE_KEYWORDS):
        return True
    return any(keyword and fold_case(keyword) in folded for keyword in extra_keywords)


def clean_item_name(raw: str) -> str:
    """Strip list numbering and separator debris from an extracted name."""
    name = _LEADING_LIST_NUMBER.sub("", raw)
    name = _WHITESPACE.sub(" ", name).strip()
    name = _TRAILING_SEPARATORS.sub("", name)
    return name.strip()


def dedupe_key(item_name: str, total_price: Decimal) -> tuple[str, Decimal]:
    """Key used to collapse repeated OCR lines into one item."""
    return (_WHITESPACE.sub(" ", item_name).strip().casefold(), total_price)
