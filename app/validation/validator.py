"""
Receipt validator.

Checks a decoded receipt against the field formats before it is scored.
Validation fails fast: the first violated constraint wins, in this order:

  1. retailer (non-empty, letters/digits/space/hyphen/ampersand)
  2. purchaseDate (real calendar date, YYYY-MM-DD)
  3. purchaseTime (24-hour HH:MM)
  4. items (at least one)
  5. each item in order: shortDescription, then price
  6. total

The receipt is never modified.
"""

import logging

from app.errors import ReceiptValidationError, ValidationReason
from app.models.receipt import Receipt
from app.validation.formats import (
    is_valid_amount,
    is_valid_description,
    is_valid_retailer,
    parse_purchase_date,
    parse_purchase_time,
)

logger = logging.getLogger(__name__)


def validate(receipt: Receipt) -> None:
    """
    Validate a receipt.

    Args:
        receipt: Receipt as decoded from the request body

    Raises:
        ReceiptValidationError: carrying the reason for the first failed check.
    """
    if not is_valid_retailer(receipt.retailer):
        logger.warning("Validation failed: retailer name '%s' is invalid", receipt.retailer)
        raise ReceiptValidationError(ValidationReason.INVALID_RETAILER)

    try:
        parse_purchase_date(receipt.purchase_date)
    except ValueError:
        logger.warning(
            "Validation failed: purchaseDate '%s' is not in YYYY-MM-DD format",
            receipt.purchase_date,
        )
        raise ReceiptValidationError(ValidationReason.INVALID_DATE)

    try:
        parse_purchase_time(receipt.purchase_time)
    except ValueError:
        logger.warning(
            "Validation failed: purchaseTime '%s' is not in HH:mm 24-hour format",
            receipt.purchase_time,
        )
        raise ReceiptValidationError(ValidationReason.INVALID_TIME)

    if not receipt.items:
        logger.warning("Validation failed: items array is empty")
        raise ReceiptValidationError(ValidationReason.EMPTY_ITEMS)

    for index, item in enumerate(receipt.items):
        # Checked on the raw value; surrounding spaces are allowed
        if not is_valid_description(item.short_description):
            logger.warning(
                "Validation failed: item at index %d has invalid shortDescription '%s'",
                index,
                item.short_description,
            )
            raise ReceiptValidationError(ValidationReason.INVALID_DESCRIPTION, item_index=index)

        if not is_valid_amount(item.price):
            logger.warning(
                "Validation failed: item at index %d has invalid price '%s'",
                index,
                item.price,
            )
            raise ReceiptValidationError(ValidationReason.INVALID_PRICE, item_index=index)

    if not is_valid_amount(receipt.total):
        logger.warning("Validation failed: total '%s' is not a valid decimal number", receipt.total)
        raise ReceiptValidationError(ValidationReason.INVALID_TOTAL)

    logger.debug("Validation successful for receipt from '%s'", receipt.retailer)
