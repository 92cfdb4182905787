"""Abstract interface for team score aggregation strategies."""

from abc import ABC, abstractmethod
from typing import List, Sequence


class TeamAggregator(ABC):
    """Abstract interface for team score aggregation strategies."""

    @abstractmethod
    def aggregate(
        self,
        accounts: "AccountScoreTable",
        teams: Sequence["Team"]
    ) -> List["TeamScore"]:
        """Fold normalized account scores into ordered per-team totals.

        Args:
            accounts: Normalized account scores keyed by lower-cased identifier
            teams: Team membership, in the order the membership source returned it
        """
        pass
