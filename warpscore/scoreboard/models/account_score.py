"""Account score model and table helpers."""

import math
from dataclasses import dataclass, field, replace
from numbers import Real
from typing import Any, Dict, Mapping

WEIGHTED_SCORE_FIELD = "weightedScore"


@dataclass(frozen=True)
class AccountScore:
    """
    Upstream participation score for a single account.

    The account identifier is case-insensitive; normalization to lower case
    happens in the account normalizer, not here. Fields other than the
    weighted score are carried through untouched in `extra`.
    """
    account: str
    weighted_score: float
    extra: Dict[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        """Validation after initialization."""
        if not self.account:
            raise ValueError("Account identifier cannot be empty")

        if isinstance(self.weighted_score, bool) or not isinstance(self.weighted_score, Real):
            raise ValueError(
                f"Weighted score for {self.account} must be a number, got {self.weighted_score!r}"
            )

        if not math.isfinite(self.weighted_score) or self.weighted_score < 0:
            raise ValueError(
                f"Weighted score for {self.account} must be finite and non-negative, got {self.weighted_score}"
            )

    def with_account(self, account: str) -> 'AccountScore':
        """Copy of this score keyed by a different identifier."""
        return replace(self, account=account)

    @classmethod
    def from_dict(cls, account: str, data: Mapping[str, Any]) -> 'AccountScore':
        """Create AccountScore from one entry of the input JSON table."""
        if not isinstance(data, Mapping) or WEIGHTED_SCORE_FIELD not in data:
            raise ValueError(f"Account {account} is missing '{WEIGHTED_SCORE_FIELD}'")

        return cls(
            account=account,
            weighted_score=data[WEIGHTED_SCORE_FIELD],
            extra={k: v for k, v in data.items() if k != WEIGHTED_SCORE_FIELD}
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the input JSON entry format."""
        return {**self.extra, WEIGHTED_SCORE_FIELD: self.weighted_score}


AccountScoreTable = Dict[str, AccountScore]


def parse_account_scores(raw: Mapping[str, Mapping[str, Any]]) -> AccountScoreTable:
    """
    Build an AccountScoreTable from parsed input JSON, keeping input order.

    Raises:
        ValueError: If any entry is missing or has an invalid weighted score
    """
    return {
        account: AccountScore.from_dict(account, data)
        for account, data in raw.items()
    }
