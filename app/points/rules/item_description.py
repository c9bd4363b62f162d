"""
Item description rule.

For each item whose trimmed description length is a multiple of 3, award
the item price multiplied by 0.2, rounded up to the nearest integer.

Scoring:
  - "Emils Cheese Pizza" (18 chars) at 12.25: 12.25 * 0.2 = 2.45 -> 3 pts
  - a 3-char description at 2.45: 0.49 -> 1 pt
  - descriptions that trim to nothing never qualify

Emits one line per qualifying item, in item order. Multiplication is done
in binary floating point and then ceiled, so a product that lands a hair
above an integer (15.00 * 0.2) rounds up to the next one.
"""

import math

from app.models.receipt import Receipt
from app.points.awards import RuleAward
from app.validation.formats import parse_amount

LENGTH_MULTIPLE = 3
PRICE_MULTIPLIER = 0.2


def score(receipt: Receipt) -> list[RuleAward]:
    awards = []

    for item in receipt.items:
        description = item.short_description.strip()
        length = len(description)

        if length == 0 or length % LENGTH_MULTIPLE != 0:
            continue

        price = parse_amount(item.price)
        raw = price * PRICE_MULTIPLIER
        points = math.ceil(raw)

        awards.append(
            RuleAward(
                points=points,
                details=(
                    f'{points} points - "{description}" is {length} characters '
                    f"(a multiple of {LENGTH_MULTIPLE}), item price {price:.2f} * "
                    f"{PRICE_MULTIPLIER} = {raw:.2f} which is rounded to: {points} points"
                ),
            )
        )

    return awards
