"""
Team payload parsing and nested team resolution.

Shared by every team source so that indexer and file payloads are
interpreted identically.
"""

from typing import Any, Dict, List, Sequence
import bittensor as bt

from warpscore.scoreboard.models.team import Team, TeamId


def parse_teams(payload: Any) -> List[Team]:
    """
    Parse a team payload: either {"teams": [...]} or a bare list of teams.

    Raises:
        ValueError: If the payload does not have the expected shape
    """
    if isinstance(payload, dict):
        payload = payload.get('teams')

    if not isinstance(payload, list):
        raise ValueError("Team payload missing 'teams' list")

    try:
        return [Team.from_dict(item) for item in payload]
    except (KeyError, TypeError, AttributeError, ValueError) as e:
        raise ValueError(f"Malformed team entry: {e}") from e


def resolve_nested_teams(teams: Sequence[Team]) -> List[Team]:
    """
    Fold members of nested teams into every ancestor team.

    A team's resolved members are its own members followed by the resolved
    members of each sub-team, depth first in sub-team order, with repeated
    accounts (compared case-insensitively) kept only at their first position.
    Cycles are cut at the first revisit and unknown sub-team ids are skipped.

    Args:
        teams: Teams as returned by the source, possibly referencing each other

    Returns:
        New Team objects in the same order with flattened membership
    """
    by_id: Dict[TeamId, Team] = {team.id: team for team in teams}
    warned = set()

    def collect(team: Team, path: set, out: List[str], seen: set) -> None:
        for member in team.members:
            key = member.lower()
            if key not in seen:
                seen.add(key)
                out.append(member)

        for child_id in team.sub_teams:
            if child_id in path:
                continue
            child = by_id.get(child_id)
            if child is None:
                if child_id not in warned:
                    warned.add(child_id)
                    bt.logging.warning(f"Team {team.id} references unknown team {child_id}")
                continue
            collect(child, path | {child_id}, out, seen)

    resolved = []
    for team in teams:
        members: List[str] = []
        collect(team, {team.id}, members, set())
        resolved.append(Team(id=team.id, members=tuple(members), sub_teams=team.sub_teams))

    return resolved
