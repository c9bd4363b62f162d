"""Result types produced by the points rules."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RuleAward:
    """Points earned from one rule, with the breakdown line explaining them."""

    points: int
    details: str


@dataclass(frozen=True)
class PointsResult:
    """Total points for a receipt and the ordered breakdown lines."""

    points: int
    breakdown: tuple[str, ...] = field(default_factory=tuple)
