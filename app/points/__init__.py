from app.points.awards import PointsResult, RuleAward
from app.points.scoring import score

__all__ = ["score", "PointsResult", "RuleAward"]
