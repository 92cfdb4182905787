"""Scoreboard run orchestrator: sequences normalization, team fetch and aggregation."""

from typing import Any, Callable, Mapping, Optional
import bittensor as bt

from .interfaces.team_aggregator import TeamAggregator
from .interfaces.team_source import TeamSource
from .models.account_score import AccountScore
from .models.scoreboard_report import ScoreboardReport
from .services.account_normalizer import AccountNormalizer, DEFAULT_MIN_WEIGHT
from .services.team_aggregation_service import TeamAggregationService


def log_collision(normalized_account: str, raw_account: str) -> None:
    bt.logging.info(f"There was a duplicate account for {normalized_account} (dropped {raw_account})")


def log_skip(account: str, weighted_score: float) -> None:
    bt.logging.debug(f"Skipping {account} with weighted score {weighted_score} below threshold")


class ScoreboardOrchestrator:
    """Coordinates one scoreboard run over already-loaded account scores."""

    def __init__(
        self,
        team_source: TeamSource,
        network_id: int,
        min_weight: float = DEFAULT_MIN_WEIGHT,
        normalizer: Optional[AccountNormalizer] = None,
        aggregator: Optional[TeamAggregator] = None,
        clock: Optional[Callable[[], Any]] = None
    ):
        self.team_source = team_source
        self.network_id = network_id
        self.normalizer = normalizer or AccountNormalizer(
            min_weight=min_weight,
            on_collision=log_collision,
            on_skip=log_skip
        )
        self.aggregator = aggregator or TeamAggregationService()
        self.clock = clock

    async def run(self, raw_accounts: Mapping[str, AccountScore]) -> ScoreboardReport:
        """
        Produce a scoreboard report.

        Errors from the team source propagate unchanged; nothing is written here.
        """
        bt.logging.info("Scoring teams")

        # 1. Drop low-weight and duplicate accounts
        accounts = self.normalizer.normalize(raw_accounts)
        bt.logging.info(
            f"Normalized {len(raw_accounts)} raw accounts to {len(accounts)} "
            f"(min weight {self.normalizer.min_weight})"
        )

        # 2. Fetch current membership, nested teams resolved
        teams = await self.team_source.get_teams(self.network_id, recursive=True)
        if not teams:
            bt.logging.warning("Team source returned no teams - scoreboard will be empty")

        # 3. Aggregate and order
        team_scores = self.aggregator.aggregate(accounts, teams)

        report = ScoreboardReport.create(
            team_scores,
            timestamp=self.clock() if self.clock else None
        )
        if team_scores:
            leader = team_scores[0]
            bt.logging.info(
                f"✅ Scored {len(team_scores)} teams (leader {leader.id}: {leader.weighted_score:.6f})"
            )
        return report
