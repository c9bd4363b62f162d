"""Exceptions raised by the receipt pipeline.

Everything user-facing derives from ReceiptProcessorError so the HTTP layer
can translate it to a status code. ScoringError is the exception: it signals
a bug (validated input the engine could not read) and maps to a 500.
"""

import enum


class ValidationReason(str, enum.Enum):
    """Reasons a receipt can fail validation, in the order they are checked."""

    INVALID_RETAILER = "retailer name is invalid"
    INVALID_DATE = "purchaseDate must be in YYYY-MM-DD format"
    INVALID_TIME = "purchaseTime must be in HH:mm 24-hour format"
    EMPTY_ITEMS = "items array must have at least one item"
    INVALID_DESCRIPTION = "item shortDescription is invalid"
    INVALID_PRICE = "item price must be a valid decimal number"
    INVALID_TOTAL = "total must be a valid decimal number"


class ReceiptProcessorError(Exception):
    """Base class for recoverable, request-level errors."""


class MalformedReceiptError(ReceiptProcessorError):
    """Request body could not be decoded into a receipt."""

    def __init__(self, message: str = "Invalid JSON format"):
        super().__init__(message)
        self.message = message


class ReceiptValidationError(ReceiptProcessorError):
    """Receipt decoded fine but violates a format constraint."""

    def __init__(self, reason: ValidationReason, item_index: int | None = None):
        super().__init__(reason.value)
        self.reason = reason
        self.item_index = item_index

    @property
    def message(self) -> str:
        return self.reason.value


class InvalidReceiptIdError(ReceiptProcessorError):
    """Identifier is not a well-formed receipt id."""

    def __init__(self, receipt_id: str):
        super().__init__(f"Invalid ID format: {receipt_id}")
        self.receipt_id = receipt_id


class ReceiptNotFoundError(ReceiptProcessorError):
    """Identifier is well-formed but nothing is stored under it."""

    def __init__(self, receipt_id: str):
        super().__init__(f"Receipt {receipt_id} not found")
        self.receipt_id = receipt_id


class ScoringError(Exception):
    """The points engine could not read a field that passed validation."""
