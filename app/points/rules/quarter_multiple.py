"""
Quarter multiple rule (25 points).

Awarded when the total is a multiple of 0.25. Every round dollar amount
also qualifies, so "10.00" collects both this and the round dollar bonus.

Checked on whole cents. Totals too long for a float still score.
"""

from app.models.receipt import Receipt
from app.points.awards import RuleAward
from app.validation.formats import parse_cents

QUARTER_CENTS = 25
QUARTER_MULTIPLE_POINTS = 25


def score(receipt: Receipt) -> list[RuleAward]:
    total_cents = parse_cents(receipt.total)

    if total_cents % QUARTER_CENTS != 0:
        return []

    return [
        RuleAward(
            points=QUARTER_MULTIPLE_POINTS,
            details=f"{QUARTER_MULTIPLE_POINTS} points - total is a multiple of 0.25",
        )
    ]
