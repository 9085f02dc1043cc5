from decimal import Decimal

from receiptsplit.domain.receipt import LineItem, PersonTotal
from receiptsplit.domain.split import per_person_totals, receipt_summary


def test_even_split_between_two() -> None:
    items = [LineItem(name="Kebab", total_price=Decimal("30.00"), assignees=("Alice", "Bob"))]

    assert per_person_totals(items) == [
        PersonTotal(name="Alice", amount=Decimal("15.00")),
        PersonTotal(name="Bob", amount=Decimal("15.00")),
    ]


def test_totals_accumulate_and_sort_by_name() -> None:
    items = [
        LineItem(name="Kebab", total_price=Decimal("20.00"), assignees=("Zoe", "Alice")),
        LineItem(name="Tea", total_price=Decimal("3.00"), assignees=("Zoe",)),
    ]

    assert per_person_totals(items) == [
        PersonTotal(name="Alice", amount=Decimal("10.00")),
        PersonTotal(name="Zoe", amount=Decimal("13.00")),
    ]


def test_unassigned_items_contribute_nothing() -> None:
    items = [
        LineItem(name="Kebab", total_price=Decimal("20.00"), assignees=("Alice",)),
        LineItem(name="Tea", total_price=Decimal("3.00")),
    ]
    assert per_person_totals(items) == [PersonTotal(name="Alice", amount=Decimal("20.00"))]


def test_no_assignments_gives_no_totals() -> None:
    assert per_person_totals([LineItem(name="Tea", total_price=Decimal("3.00"))]) == []
    assert per_person_totals([]) == []


def test_split_uses_total_price_not_unit_price() -> None:
    item = LineItem(
        name="Kebab",
        quantity=2,
        unit_price=Decimal("9.00"),
        total_price=Decimal("20.00"),
        assignees=("Alice",),
    )
    assert per_person_totals([item])[0].amount == Decimal("20.00")


def test_shares_conserve_the_assigned_total() -> None:
    items = [
        LineItem(name="Pizza", total_price=Decimal("10.00"), assignees=("Alice", "Bob", "Carol")),
        LineItem(name="Tea", total_price=Decimal("3.00"), assignees=("Bob",)),
        LineItem(name="Water", total_price=Decimal("2.50")),
    ]

    totals = per_person_totals(items)
    summary = receipt_summary(items)

    assert abs(sum(t.amount for t in totals) - summary.assigned_amount) < Decimal("1e-20")


def test_receipt_summary() -> None:
    items = [
        LineItem(name="Kebab", total_price=Decimal("20.00"), assignees=("Alice",)),
        LineItem(name="Tea", total_price=Decimal("3.00")),
        LineItem(name="Water", total_price=Decimal("2.50"), assignees=("Alice", "Bob")),
    ]

    summary = receipt_summary(items)

    assert summary.total_amount == Decimal("25.50")
    assert summary.assigned_amount == Decimal("22.50")
    assert summary.unassigned_amount == Decimal("3.00")
    assert summary.total_items == 3
    assert summary.assigned_items == 2


def test_empty_summary() -> None:
    summary = receipt_summary([])
    assert summary.total_amount == Decimal("0")
    assert summary.total_items == 0
    assert summary.assigned_items == 0
