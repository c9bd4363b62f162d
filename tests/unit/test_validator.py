"""Unit tests for receipt validation."""

from __future__ import annotations

from dataclasses import replace

import pytest

from app.errors import ReceiptValidationError, ValidationReason
from app.models.receipt import Item, Receipt
from app.validation import validate


def _with_item(receipt: Receipt, index: int, **changes: str) -> Receipt:
    items = list(receipt.items)
    items[index] = replace(items[index], **changes)
    return replace(receipt, items=tuple(items))


def test_valid_receipts_pass(target_receipt: Receipt, corner_market_receipt: Receipt) -> None:
    """Reference receipts validate without raising."""
    validate(target_receipt)
    validate(corner_market_receipt)


@pytest.mark.parametrize(
    ("field", "value", "reason"),
    [
        ("retailer", "", ValidationReason.INVALID_RETAILER),
        ("retailer", "Target$", ValidationReason.INVALID_RETAILER),
        ("retailer", "Target_Store", ValidationReason.INVALID_RETAILER),
        ("retailer", "Café", ValidationReason.INVALID_RETAILER),
        ("purchase_date", "2022-13-01", ValidationReason.INVALID_DATE),
        ("purchase_date", "2022-02-30", ValidationReason.INVALID_DATE),
        ("purchase_date", "2022-1-01", ValidationReason.INVALID_DATE),
        ("purchase_date", "01/01/2022", ValidationReason.INVALID_DATE),
        ("purchase_time", "25:00", ValidationReason.INVALID_TIME),
        ("purchase_time", "12:60", ValidationReason.INVALID_TIME),
        ("purchase_time", "9:05", ValidationReason.INVALID_TIME),
        ("purchase_time", "1:01 PM", ValidationReason.INVALID_TIME),
        ("items", (), ValidationReason.EMPTY_ITEMS),
        ("total", "35", ValidationReason.INVALID_TOTAL),
        ("total", "35.3", ValidationReason.INVALID_TOTAL),
        ("total", "-35.35", ValidationReason.INVALID_TOTAL),
        ("total", "35.35\n", ValidationReason.INVALID_TOTAL),
    ],
)
def test_rejects_bad_receipt_fields(
    target_receipt: Receipt, field: str, value: object, reason: ValidationReason
) -> None:
    """Each bad field value fails with its own reason."""
    receipt = replace(target_receipt, **{field: value})

    with pytest.raises(ReceiptValidationError) as exc_info:
        validate(receipt)

    assert exc_info.value.reason is reason
    assert exc_info.value.message == reason.value


@pytest.mark.parametrize(
    ("changes", "reason"),
    [
        ({"short_description": ""}, ValidationReason.INVALID_DESCRIPTION),
        ({"short_description": "Pizza & Wings"}, ValidationReason.INVALID_DESCRIPTION),
        ({"short_description": "Soda!"}, ValidationReason.INVALID_DESCRIPTION),
        ({"price": "6.5"}, ValidationReason.INVALID_PRICE),
        ({"price": "6"}, ValidationReason.INVALID_PRICE),
        ({"price": "$6.50"}, ValidationReason.INVALID_PRICE),
    ],
)
def test_rejects_bad_items(target_receipt: Receipt, changes: dict, reason: ValidationReason) -> None:
    """Item failures report the reason and the offending index."""
    receipt = _with_item(target_receipt, 2, **changes)

    with pytest.raises(ReceiptValidationError) as exc_info:
        validate(receipt)

    assert exc_info.value.reason is reason
    assert exc_info.value.item_index == 2


def test_boundary_times_and_dates_pass(target_receipt: Receipt) -> None:
    for purchase_time in ("00:00", "23:59"):
        validate(replace(target_receipt, purchase_time=purchase_time))
    validate(replace(target_receipt, purchase_date="2024-02-29"))


def test_description_checked_untrimmed(target_receipt: Receipt) -> None:
    """Leading and trailing spaces are allowed; whitespace-only still passes."""
    validate(_with_item(target_receipt, 0, short_description="   "))


def test_first_failure_wins(target_receipt: Receipt) -> None:
    """Retailer is checked before date, date before time, and so on."""
    receipt = replace(
        target_receipt,
        retailer="",
        purchase_date="bad",
        purchase_time="bad",
        total="bad",
    )
    with pytest.raises(ReceiptValidationError) as exc_info:
        validate(receipt)
    assert exc_info.value.reason is ValidationReason.INVALID_RETAILER

    receipt = replace(target_receipt, purchase_time="25:00", items=())
    with pytest.raises(ReceiptValidationError) as exc_info:
        validate(receipt)
    assert exc_info.value.reason is ValidationReason.INVALID_TIME


def test_description_checked_before_price_within_item(target_receipt: Receipt) -> None:
    receipt = _with_item(target_receipt, 0, short_description="", price="x")

    with pytest.raises(ReceiptValidationError) as exc_info:
        validate(receipt)

    assert exc_info.value.reason is ValidationReason.INVALID_DESCRIPTION


def test_items_checked_in_order(target_receipt: Receipt) -> None:
    receipt = _with_item(target_receipt, 3, price="1")
    receipt = _with_item(receipt, 1, short_description="bad*")

    with pytest.raises(ReceiptValidationError) as exc_info:
        validate(receipt)

    assert exc_info.value.item_index == 1


def test_does_not_mutate_input(target_receipt: Receipt) -> None:
    before = replace(target_receipt)
    validate(target_receipt)
    assert target_receipt == before


def test_single_item_receipt_passes() -> None:
    receipt = Receipt(
        retailer="Walgreens",
        purchase_date="2022-01-02",
        purchase_time="08:13",
        items=(Item(short_description="Pepsi - 12-oz", price="1.25"),),
        total="1.25",
    )
    validate(receipt)


def test_rejects_amounts_too_large_for_a_float(target_receipt: Receipt) -> None:
    """Digit strings past the float range fail with the usual amount reasons."""
    huge = "9" * 400 + ".00"

    with pytest.raises(ReceiptValidationError) as exc_info:
        validate(replace(target_receipt, total=huge))
    assert exc_info.value.reason is ValidationReason.INVALID_TOTAL

    with pytest.raises(ReceiptValidationError) as exc_info:
        validate(_with_item(target_receipt, 0, price=huge))
    assert exc_info.value.reason is ValidationReason.INVALID_PRICE
    assert exc_info.value.item_index == 0


def test_accepts_largest_float_sized_amounts(target_receipt: Receipt) -> None:
    large = "9" * 308 + ".00"
    validate(_with_item(replace(target_receipt, total=large), 0, price=large))
