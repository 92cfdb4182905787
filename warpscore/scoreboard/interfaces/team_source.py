"""Abstract interface for team membership sources."""

from abc import ABC, abstractmethod
from typing import List


class TeamSource(ABC):
    """Read-only source of team membership for a network."""

    @abstractmethod
    async def get_teams(self, network_id: int, recursive: bool = True) -> List["Team"]:
        """Fetch the current teams.

        Args:
            network_id: Network the team registry lives on
            recursive: Fold members of nested teams into their parents
        """
        pass
