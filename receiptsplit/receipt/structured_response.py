"""Parse JSON item lists returned by AI receipt extractors.

Expected shape (extra keys are ignored)::

    {
      "items": [
        {"name": "Adana Kebab", "quantity": 1, "unit_price": 12.0, "total_price": 12.0}
      ],
      "total_amount": 12.0,
      "currency": "AZN"
    }
"""

from __future__ import annotations

import json
import re
from decimal import Decimal, InvalidOperation
from typing import Any

from receiptsplit.domain.receipt import LineItem
from receiptsplit.runtime.logging import get_logger

from .receipt_parser import dedupe_items
from .text_parser import MAX_ITEMS, fallback_items

logger = get_logger(__name__)

_CODE_FENCE = re.compile(r"```(?:json)?", re.IGNORECASE)


class MalformedResponse(ValueError):
    """Raised internally when a response is not the expected JSON shape."""


def _to_decimal(value: Any) -> Decimal:
    if value is None or isinstance(value, bool):
        return Decimal("0")
    try:
        # str() first so floats like 12.1 keep their printed value.
        amount = Decimal(str(value).replace(",", "."))
    except InvalidOperation:
        return Decimal("0")
    return amount if amount.is_finite() else Decimal("0")


def _to_quantity(value: Any) -> int:
    try:
        return max(1, int(value))
    except (TypeError, ValueError):
        return 1


def _decode_items(response_text: str) -> list[dict[str, Any]]:
    cleaned = _CODE_FENCE.sub("", response_text).strip()
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise MalformedResponse(f"Response is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise MalformedResponse("Response JSON is not an object")
    raw_items = payload.get("items", [])
    if not isinstance(raw_items, list):
        raise MalformedResponse("Response 'items' is not a list")
    return [raw for raw in raw_items if isinstance(raw, dict)]


def items_from_payload(raw_items: list[dict[str, Any]]) -> list[LineItem]:
    """Convert decoded item dicts, dropping blank names and non-positive totals."""
    items: list[LineItem] = []
    for raw in raw_items:
        name = str(raw.get("name") or "").strip()
        total_price = _to_decimal(raw.get("total_price"))
        if not name or total_price <= 0:
            continue
        unit_price = _to_decimal(raw.get("unit_price"))
        items.append(
            LineItem(
                name=name,
                quantity=_to_quantity(raw.get("quantity", 1)),
                unit_price=unit_price if unit_price >= 0 else Decimal("0"),
                total_price=total_price,
                provenance="structured",
            )
        )
    return items


def parse_structured_response(response_text: str, *, seed_placeholders: bool = True) -> list[LineItem]:
    """
    Parse an extractor's JSON response into line items.

    Malformed responses are salvaged line by line, then seeded with
    placeholders, the same way unstructured OCR text is.
    """
    if not response_text or not response_text.strip():
        return []

    try:
        raw_items = _decode_items(response_text)
    except MalformedResponse as exc:
        logger.warning("Falling back to line salvage: %s", exc)
        return dedupe_items(fallback_items(response_text, seed_placeholders=seed_placeholders))[:MAX_ITEMS]

    items = dedupe_items(items_from_payload(raw_items))
    logger.debug("Structured response carried %d usable items", len(items))
    return items[:MAX_ITEMS]
