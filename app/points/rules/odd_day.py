"""
Odd purchase day rule (6 points).

Awarded when the day of the month of purchaseDate is odd.
"""

from app.models.receipt import Receipt
from app.points.awards import RuleAward
from app.validation.formats import parse_purchase_date

ODD_DAY_POINTS = 6


def score(receipt: Receipt) -> list[RuleAward]:
    purchase_date = parse_purchase_date(receipt.purchase_date)

    if purchase_date.day % 2 == 0:
        return []

    return [
        RuleAward(
            points=ODD_DAY_POINTS,
            details=f"{ODD_DAY_POINTS} points - purchase day is odd",
        )
    ]
