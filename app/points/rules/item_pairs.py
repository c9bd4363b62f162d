"""
Item pairs rule (5 points per pair).

Every two items on the receipt earn 5 points; an odd item left over earns
nothing. Always emits a line, even for a single item.
"""

from app.models.receipt import Receipt
from app.points.awards import RuleAward

POINTS_PER_PAIR = 5


def score(receipt: Receipt) -> list[RuleAward]:
    item_count = len(receipt.items)
    pairs = item_count // 2
    points = pairs * POINTS_PER_PAIR

    return [
        RuleAward(
            points=points,
            details=f"{points} points - {item_count} items ({pairs} pairs @ {POINTS_PER_PAIR} points each)",
        )
    ]
