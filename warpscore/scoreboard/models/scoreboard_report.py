"""Scoreboard report, the single artifact of a run."""

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Sequence, Tuple

from warpscore.utils.date_utils import format_timestamp, utc_now
from .team import TeamScore


@dataclass(frozen=True)
class ScoreboardReport:
    """Ordered team scores plus the time the report was captured."""
    teams: Tuple[TeamScore, ...]
    timestamp: datetime

    @classmethod
    def create(cls, teams: Sequence[TeamScore], timestamp: Optional[datetime] = None) -> 'ScoreboardReport':
        """Wrap already-ordered team scores, stamping the current UTC time by default."""
        return cls(teams=tuple(teams), timestamp=timestamp or utc_now())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "teams": [team.to_dict() for team in self.teams],
            "timestamp": format_timestamp(self.timestamp)
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), allow_nan=False)

    def __repr__(self) -> str:
        return f"ScoreboardReport({len(self.teams)} teams @ {format_timestamp(self.timestamp)})"
