"""
Afternoon purchase rule (10 points).

Awarded when the purchase hour is 14 or 15, i.e. 2:00pm through 3:59pm
inclusive. Only the hour is looked at; 16:00 does not qualify.
"""

from app.models.receipt import Receipt
from app.points.awards import RuleAward
from app.validation.formats import parse_purchase_time

AFTERNOON_HOURS = (14, 15)
AFTERNOON_POINTS = 10


def score(receipt: Receipt) -> list[RuleAward]:
    purchase_time = parse_purchase_time(receipt.purchase_time)

    if purchase_time.hour not in AFTERNOON_HOURS:
        return []

    return [
        RuleAward(
            points=AFTERNOON_POINTS,
            details=f"{AFTERNOON_POINTS} points - purchase time is between 2:00pm and 4:00pm",
        )
    ]
