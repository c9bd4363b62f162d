"""
Receipt service: the pipeline behind the /receipts endpoints.

Submission runs in sequence:
  1. Validator (reject malformed fields before anything else happens)
  2. Identifier assignment
  3. Points engine
  4. Store write

Lookups check the identifier format before touching the store so that a
garbage id (400) stays distinguishable from an unknown one (404).

Keeps the API layer thin by encapsulating the pipeline logic here.
"""

import logging
import uuid

from app.errors import InvalidReceiptIdError, ReceiptNotFoundError
from app.models.receipt import Receipt, ScoredReceipt
from app.points import score
from app.store.memory import ReceiptStore
from app.validation import validate

logger = logging.getLogger(__name__)


def new_receipt_id() -> str:
    """Generate a random identifier in canonical hyphenated form."""
    return str(uuid.uuid4())


def normalize_receipt_id(receipt_id: str) -> str:
    """
    Check that an identifier is well-formed and return its canonical form.

    Any spelling uuid.UUID accepts (upper case, braces, urn prefix) maps to
    the lower-case hyphenated key the store uses.

    Raises:
        InvalidReceiptIdError: if the identifier is not a UUID.
    """
    try:
        return str(uuid.UUID(receipt_id))
    except (ValueError, TypeError):
        raise InvalidReceiptIdError(receipt_id)


def process_receipt(receipt: Receipt, store: ReceiptStore) -> ScoredReceipt:
    """
    Validate, score and store a submitted receipt.

    Args:
        receipt: Receipt decoded from the request body
        store: Where the scored receipt is kept for later lookup

    Returns:
        The stored ScoredReceipt, including its new identifier.

    Raises:
        ReceiptValidationError: if the receipt fails validation.
        ScoringError: if the engine rejects a validated receipt.
    """
    validate(receipt)

    receipt_id = new_receipt_id()
    result = score(receipt)

    scored = ScoredReceipt(
        id=receipt_id,
        receipt=receipt,
        points=result.points,
        breakdown=result.breakdown,
    )
    store.put(receipt_id, scored)

    logger.info("Receipt processed successfully. ID: %s, Points: %d", receipt_id, scored.points)

    return scored


def get_scored_receipt(receipt_id: str, store: ReceiptStore) -> ScoredReceipt:
    """
    Look up a previously scored receipt.

    Raises:
        InvalidReceiptIdError: if the identifier is not well-formed.
        ReceiptNotFoundError: if nothing is stored under the identifier.
    """
    key = normalize_receipt_id(receipt_id)

    scored = store.get(key)
    if scored is None:
        logger.info("Receipt not found for ID: %s", key)
        raise ReceiptNotFoundError(key)

    return scored
