"""Data models for the scoreboard."""

from .account_score import AccountScore, AccountScoreTable, parse_account_scores
from .team import Team, TeamScore
from .scoreboard_report import ScoreboardReport

__all__ = [
    "AccountScore",
    "AccountScoreTable",
    "parse_account_scores",
    "Team",
    "TeamScore",
    "ScoreboardReport",
]
