"""Team membership and team score models."""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, Union

TeamId = Union[str, int]


@dataclass(frozen=True)
class Team:
    """
    A named group of accounts whose scores are pooled.

    Members keep the order the membership source returned them in; that
    order is the summation order used by the aggregator. `sub_teams` lists
    ids of nested teams, which the membership source folds in when asked to
    resolve teams recursively. Ids are kept exactly as the source gave them.
    """
    id: TeamId
    members: Tuple[str, ...] = ()
    sub_teams: Tuple[TeamId, ...] = field(default=(), compare=False)

    def __post_init__(self):
        """Validation after initialization."""
        if self.id is None or self.id == "":
            raise ValueError("Team ID cannot be empty")

        if isinstance(self.id, bool) or not isinstance(self.id, (str, int)):
            raise ValueError(f"Team ID must be a string or integer, got {self.id!r}")

        # Accept any iterable of members and store it immutably
        object.__setattr__(self, 'members', tuple(self.members))
        object.__setattr__(self, 'sub_teams', tuple(self.sub_teams))

        for member in self.members:
            if not isinstance(member, str) or not member:
                raise ValueError(f"Team {self.id} has invalid member {member!r}")

        for child_id in self.sub_teams:
            if isinstance(child_id, bool) or not isinstance(child_id, (str, int)) or child_id == "":
                raise ValueError(f"Team {self.id} has invalid sub-team id {child_id!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Team':
        """Create Team from indexer/file payload: {"id", "members", "teams"?}."""
        members = data.get('members', [])
        if not isinstance(members, list):
            raise ValueError(f"Team {data['id']!r} members must be a list, got {type(members).__name__}")

        sub_teams = data.get('teams', [])
        if not isinstance(sub_teams, list):
            raise ValueError(f"Team {data['id']!r} teams must be a list, got {type(sub_teams).__name__}")

        return cls(
            id=data['id'],
            members=tuple(members),
            sub_teams=tuple(sub_teams)
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'members': list(self.members),
            'teams': list(self.sub_teams)
        }


@dataclass(frozen=True)
class TeamScore:
    """Weighted score of one team for a single scoreboard run."""
    id: TeamId
    weighted_score: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to report JSON format."""
        return {
            'id': self.id,
            'weightedScore': self.weighted_score
        }
