"""Core services for the scoreboard."""

from .account_normalizer import AccountNormalizer, normalize, DEFAULT_MIN_WEIGHT
from .team_aggregation_service import TeamAggregationService

__all__ = [
    "AccountNormalizer",
    "normalize",
    "DEFAULT_MIN_WEIGHT",
    "TeamAggregationService",
]
