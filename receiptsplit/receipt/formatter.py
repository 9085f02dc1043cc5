"""Format items and split results for display."""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from receiptsplit.domain.receipt import LineItem, PersonTotal, ReceiptSummary

DEFAULT_CURRENCY_SYMBOL = "₼"
_CENT = Decimal("0.01")


def format_currency(amount: Decimal | float | int, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Render an amount with two decimals, rounding half up (e.g. "₼15.50")."""
    value = Decimal(str(amount)).quantize(_CENT, rounding=ROUND_HALF_UP)
    return f"{symbol}{value}"


def format_quantity(quantity: int) -> str:
    return "1 item" if quantity == 1 else f"{quantity} items"


def format_item_details(
    quantity: int, unit_price: Decimal, total_price: Decimal, symbol: str = DEFAULT_CURRENCY_SYMBOL
) -> str:
    return f"Qty: {quantity} × {format_currency(unit_price, symbol)} = {format_currency(total_price, symbol)}"


def format_split_info(assignee_count: int, total_price: Decimal, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    if assignee_count <= 0:
        return "Not assigned"
    share = total_price / assignee_count
    return f"Split {assignee_count} ways: {format_currency(share, symbol)} each"


def _aligned_rows(rows: list[tuple[str, str]], indent: str = "  ") -> list[str]:
    """Left-align labels and right-align values in two columns."""
    if not rows:
        return []
    label_width = max(len(label) for label, _ in rows)
    value_width = max(len(value) for _, value in rows)
    return [f"{indent}{label.ljust(label_width)}  {value.rjust(value_width)}" for label, value in rows]


def format_items(items: Sequence[LineItem], symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Numbered item listing with quantity details and assignees."""
    if not items:
        return "No items."

    lines: list[str] = []
    for index, item in enumerate(items, 1):
        marker = " [placeholder]" if item.provenance == "placeholder" else ""
        lines.append(f"{index:2}. {item.name}{marker}  {format_currency(item.total_price, symbol)}")
        lines.append(f"    {format_item_details(item.quantity, item.unit_price, item.total_price, symbol)}")
        assigned = ", ".join(item.assignees) if item.assignees else "Unassigned"
        lines.append(f"    {format_split_info(len(item.assignees), item.total_price, symbol)} [{assigned}]")
    return "\n".join(lines)


def format_results(
    person_totals: Sequence[PersonTotal],
    summary: ReceiptSummary,
    symbol: str = DEFAULT_CURRENCY_SYMBOL,
) -> str:
    """Per-person totals followed by the receipt summary."""
    lines = ["Per person:"]
    if person_totals:
        lines.extend(_aligned_rows([(total.name, format_currency(total.amount, symbol)) for total in person_totals]))
    else:
        lines.append("  (nothing assigned yet)")

    lines.append("")
    lines.append("Summary:")
    lines.extend(
        _aligned_rows(
            [
                ("Receipt total", format_currency(summary.total_amount, symbol)),
                ("Assigned", format_currency(summary.assigned_amount, symbol)),
                ("Unassigned", format_currency(summary.unassigned_amount, symbol)),
                ("Items assigned", f"{summary.assigned_items}/{summary.total_items}"),
            ]
        )
    )
    return "\n".join(lines)
