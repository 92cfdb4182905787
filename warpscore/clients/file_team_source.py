"""Team membership read from a local JSON export, for offline runs."""

import json
from pathlib import Path
from typing import List, Union
import bittensor as bt

from warpscore.scoreboard.interfaces.team_source import TeamSource
from warpscore.scoreboard.models.team import Team
from warpscore.utils.error_handling import log_and_raise_team_source_error
from .team_helpers import parse_teams, resolve_nested_teams


class FileTeamSource(TeamSource):
    """Loads teams from a file holding the same payload the indexer serves."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    async def get_teams(self, network_id: int, recursive: bool = True) -> List[Team]:
        try:
            with open(self.path, 'r') as f:
                teams = parse_teams(json.load(f))
        except OSError as e:
            log_and_raise_team_source_error(e, str(self.path), context="Reading teams file")
        except (json.JSONDecodeError, ValueError) as e:
            log_and_raise_team_source_error(e, str(self.path), context="Parsing teams file")

        if recursive:
            teams = resolve_nested_teams(teams)

        bt.logging.info(f"Loaded {len(teams)} teams from {self.path} (network {network_id})")
        return teams
