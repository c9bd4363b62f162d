"""Receipt endpoints: submit a receipt, then look up its points."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from app.errors import (
    InvalidReceiptIdError,
    ReceiptNotFoundError,
    ReceiptValidationError,
    ScoringError,
)
from app.models.receipt import ScoredReceipt
from app.services.receipt_service import get_scored_receipt, process_receipt
from app.store.memory import ReceiptStore, get_receipt_store
from app.api.schemas.receipts import (
    BreakdownResponse,
    PointsResponse,
    ProcessReceiptResponse,
    ReceiptPayload,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/receipts", tags=["Receipts"])


def _lookup(receipt_id: str, store: ReceiptStore) -> ScoredReceipt:
    """Fetch a scored receipt, translating lookup errors to HTTP errors."""
    try:
        return get_scored_receipt(receipt_id, store)
    except InvalidReceiptIdError:
        logger.warning("Invalid UUID format: %s", receipt_id)
        raise HTTPException(status_code=400, detail="Invalid ID format")
    except ReceiptNotFoundError:
        raise HTTPException(status_code=404, detail="Receipt not found")


@router.post("/process", response_model=ProcessReceiptResponse)
def submit_receipt(
    payload: ReceiptPayload,
    store: ReceiptStore = Depends(get_receipt_store),
):
    """
    Validate and score a receipt.

    Returns the identifier to use with the points and breakdown endpoints.
    """
    try:
        scored = process_receipt(payload.to_receipt(), store)
    except ReceiptValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid receipt: {e.message}")
    except ScoringError:
        logger.exception("Points engine rejected a validated receipt")
        raise HTTPException(status_code=500, detail="Internal error while scoring receipt")

    return ProcessReceiptResponse(id=scored.id)


@router.get("/{receipt_id}/points", response_model=PointsResponse)
def get_points(
    receipt_id: str,
    store: ReceiptStore = Depends(get_receipt_store),
):
    """Get the points awarded to a receipt."""
    scored = _lookup(receipt_id, store)
    logger.info("Points retrieved for Receipt ID: %s, Points: %d", scored.id, scored.points)

    return PointsResponse(points=scored.points)


@router.get("/{receipt_id}/breakdown", response_model=BreakdownResponse)
def get_breakdown(
    receipt_id: str,
    store: ReceiptStore = Depends(get_receipt_store),
):
    """Get the points awarded to a receipt with one line per rule that fired."""
    scored = _lookup(receipt_id, store)
    logger.info("Breakdown retrieved for Receipt ID: %s", scored.id)

    return BreakdownResponse(points=scored.points, breakdown=list(scored.breakdown))
