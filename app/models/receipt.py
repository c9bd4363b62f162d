"""Domain records for submitted and scored receipts.

Field values are kept exactly as submitted (prices and totals stay strings)
so breakdown lines and echoes never reformat what the customer sent.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Item:
    """A single purchased line on a receipt."""

    short_description: str
    price: str


@dataclass(frozen=True)
class Receipt:
    """A purchase receipt as submitted for scoring."""

    retailer: str
    purchase_date: str
    purchase_time: str
    items: tuple[Item, ...]
    total: str


@dataclass(frozen=True)
class ScoredReceipt:
    """A validated receipt together with its points and breakdown."""

    id: str
    receipt: Receipt
    points: int
    breakdown: tuple[str, ...] = field(default_factory=tuple)

    def __repr__(self) -> str:
        return f"<ScoredReceipt {self.id}: {self.points} points>"
