"""Abstract interfaces for the scoreboard."""

from .team_aggregator import TeamAggregator
from .team_source import TeamSource

__all__ = [
    "TeamAggregator",
    "TeamSource",
]
