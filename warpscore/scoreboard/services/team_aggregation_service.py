"""Joins normalized account scores against team membership."""

from typing import List, Sequence
import numpy as np
from ..interfaces.team_aggregator import TeamAggregator
from ..models.account_score import AccountScoreTable
from ..models.team import Team, TeamScore
from .account_normalizer import normalize_account_id


class TeamAggregationService(TeamAggregator):
    """Default implementation of team score aggregation."""

    def aggregate(
        self,
        accounts: AccountScoreTable,
        teams: Sequence[Team]
    ) -> List[TeamScore]:
        """
        Sum member scores per team and order teams by score, highest first.

        Each team is summed in a single pass over its members in the order
        the team lists them. A member listed more than once counts once and
        members without a score contribute nothing. Teams with equal totals
        keep their input order.
        """
        if not teams:
            return []

        totals = np.zeros(len(teams), dtype=np.float64)

        for team_idx, team in enumerate(teams):
            seen = set()
            for member in team.members:
                key = normalize_account_id(member)
                if key in seen:
                    continue
                seen.add(key)
                if (score := accounts.get(key)) is not None:
                    totals[team_idx] += score.weighted_score

        order = np.argsort(-totals, kind="stable")

        return [
            TeamScore(id=teams[idx].id, weighted_score=float(totals[idx]))
            for idx in order
        ]
