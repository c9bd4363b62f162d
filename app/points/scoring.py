"""
Points engine: runs every rule against a receipt and totals the points.

Rules run in a fixed order and the breakdown lines come out in that same
order, which makes the order part of the response:

  1. retailer name      one point per alphanumeric character
  2. round dollar       50 points if the total has no cents
  3. quarter multiple   25 points if the total is a multiple of 0.25
  4. item pairs         5 points for every two items
  5. item description   ceil(price * 0.2) per item with a trimmed
                        description length that is a multiple of 3
  6. odd day            6 points if the purchase day is odd
  7. afternoon          10 points for purchases from 2:00pm to 3:59pm

The engine only sees validated receipts. A parse failure here means the
validator let something through and is raised as ScoringError.
"""

import logging

from app.errors import ScoringError
from app.models.receipt import Receipt
from app.points.awards import PointsResult
from app.points.rules import (
    afternoon_purchase,
    item_description,
    item_pairs,
    odd_day,
    quarter_multiple,
    retailer_name,
    round_dollar,
)

logger = logging.getLogger(__name__)

RULES = [
    ("retailer_name", retailer_name.score),
    ("round_dollar", round_dollar.score),
    ("quarter_multiple", quarter_multiple.score),
    ("item_pairs", item_pairs.score),
    ("item_description", item_description.score),
    ("odd_day", odd_day.score),
    ("afternoon_purchase", afternoon_purchase.score),
]


def score(receipt: Receipt) -> PointsResult:
    """
    Score a validated receipt.

    Returns:
        PointsResult with the total and one breakdown line per award.

    Raises:
        ScoringError: if a rule cannot parse a field of the receipt.
    """
    total_points = 0
    breakdown: list[str] = []

    for rule_name, rule_fn in RULES:
        try:
            awards = rule_fn(receipt)
        except ValueError as e:
            raise ScoringError(f"Rule '{rule_name}' could not read receipt: {e}") from e

        for award in awards:
            total_points += award.points
            breakdown.append(award.details)

    logger.info("Points calculated for receipt: %d", total_points)

    return PointsResult(points=total_points, breakdown=tuple(breakdown))
