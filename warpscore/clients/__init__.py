"""Team membership sources."""

from .team_membership_client import TeamMembershipClient
from .file_team_source import FileTeamSource
from .team_helpers import parse_teams, resolve_nested_teams

__all__ = [
    "TeamMembershipClient",
    "FileTeamSource",
    "parse_teams",
    "resolve_nested_teams",
]
