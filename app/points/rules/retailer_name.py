"""
Retailer name rule.

One point for every ASCII letter or digit in the retailer name. Spaces,
hyphens and ampersands count for nothing.

Always emits a line, even when the name contributes 0 points.
"""

from app.models.receipt import Receipt
from app.points.awards import RuleAward
from app.validation.formats import count_alphanumeric


def score(receipt: Receipt) -> list[RuleAward]:
    count = count_alphanumeric(receipt.retailer)
    return [
        RuleAward(
            points=count,
            details=f"{count} points - retailer name ({receipt.retailer}) has {count} alphanumeric characters",
        )
    ]
