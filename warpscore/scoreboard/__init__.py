"""
Team scoreboard engine.

Normalizes per-account participation scores, joins them against team
membership and produces an ordered, timestamped scoreboard report.
"""

from .orchestrator import ScoreboardOrchestrator

__all__ = [
    "ScoreboardOrchestrator",
]
