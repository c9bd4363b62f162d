"""
Round dollar rule (50 points).

Awarded when the total has no cents, e.g. "10.00" but not "10.01".
"""

from app.models.receipt import Receipt
from app.points.awards import RuleAward
from app.validation.formats import parse_cents

ROUND_DOLLAR_POINTS = 50


def score(receipt: Receipt) -> list[RuleAward]:
    total_cents = parse_cents(receipt.total)

    if total_cents % 100 != 0:
        return []

    return [
        RuleAward(
            points=ROUND_DOLLAR_POINTS,
            details=f"{ROUND_DOLLAR_POINTS} points - total is a round dollar amount with no cents",
        )
    ]
