"""
Client for reading team membership from the team indexer.
Handles API communication, payload parsing and nested team resolution.
"""
import httpx
import bittensor as bt
import json
from typing import List, Optional

from warpscore.scoreboard.interfaces.team_source import TeamSource
from warpscore.scoreboard.models.team import Team
from warpscore.utils.config import TEAM_INDEXER_URL, TEAM_SOURCE_TIMEOUT, TEAM_INDEXER_API_KEY
from warpscore.utils.error_handling import log_and_raise_team_source_error
from .team_helpers import parse_teams, resolve_nested_teams


class TeamMembershipClient(TeamSource):
    """Reads the teams registered on a control contract via the team indexer."""

    def __init__(
        self,
        control_address: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        api_key: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.control_address = control_address
        self.base_url = (base_url or TEAM_INDEXER_URL).rstrip('/')
        self.timeout = timeout if timeout is not None else TEAM_SOURCE_TIMEOUT
        self.api_key = api_key if api_key is not None else TEAM_INDEXER_API_KEY
        self.transport = transport
        bt.logging.debug(f"TeamMembershipClient initialized with endpoint: {self.base_url}")

    def teams_url(self, network_id: int) -> str:
        return f"{self.base_url}/teams/{int(network_id)}/{self.control_address}"

    async def get_teams(self, network_id: int, recursive: bool = True) -> List[Team]:
        """
        Fetch teams from the indexer.

        Args:
            network_id: Network the control contract is deployed on
            recursive: Ask for (and apply) nested team resolution

        Returns:
            Teams in indexer order

        Raises:
            TeamSourceError: On timeout, HTTP error status or malformed payload
        """
        url = self.teams_url(network_id)
        params = {"recursive": "true" if recursive else "false"}
        headers = {"Authorization": self.api_key} if self.api_key else {}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url, params=params, headers=headers)
                response.raise_for_status()
                teams = parse_teams(response.json())

        except httpx.TimeoutException as e:
            log_and_raise_team_source_error(e, url, params, context="Team indexer request timed out")
        except httpx.HTTPStatusError as e:
            log_and_raise_team_source_error(
                e, url, params, context=f"Team indexer returned HTTP {e.response.status_code}"
            )
        except httpx.HTTPError as e:
            log_and_raise_team_source_error(e, url, params, context="Team indexer request")
        except (json.JSONDecodeError, ValueError) as e:
            log_and_raise_team_source_error(e, url, params, context="Parsing team indexer response")

        if recursive:
            teams = resolve_nested_teams(teams)

        bt.logging.info(f"📡 Fetched {len(teams)} teams from {self.base_url} (recursive={recursive})")
        return teams
