"""Filters and deduplicates raw account scores before aggregation."""

from typing import Callable, Mapping, Optional

from ..models.account_score import AccountScore, AccountScoreTable

DEFAULT_MIN_WEIGHT = 0.01

# (normalized_account, raw_account)
CollisionCallback = Callable[[str, str], None]
# (raw_account, weighted_score)
SkipCallback = Callable[[str, float], None]


def normalize_account_id(account: str) -> str:
    return account.lower()


def normalize(
    raw: Mapping[str, AccountScore],
    min_weight: float = DEFAULT_MIN_WEIGHT,
    on_collision: Optional[CollisionCallback] = None,
    on_skip: Optional[SkipCallback] = None
) -> AccountScoreTable:
    """
    Drop low-weight accounts and merge case variants of the same account.

    Entries are visited in the mapping's iteration order. An entry whose
    weighted score is strictly below `min_weight` is dropped before it is
    considered for deduplication. Among the remaining entries the first one
    seen for each lower-cased identifier is kept; every later variant is
    discarded and reported through `on_collision`.

    Args:
        raw: Account scores keyed by raw identifier
        min_weight: Inclusion threshold (inclusive)
        on_collision: Called with (normalized, raw) for each discarded duplicate
        on_skip: Called with (raw, score) for each below-threshold account

    Returns:
        New table keyed by lower-cased identifier; values carry the same key
        as their `account`
    """
    normalized: AccountScoreTable = {}

    for account, score in raw.items():
        if score.weighted_score < min_weight:
            if on_skip is not None:
                on_skip(account, score.weighted_score)
            continue

        normalized_account = normalize_account_id(account)
        if normalized_account in normalized:
            if on_collision is not None:
                on_collision(normalized_account, account)
            continue

        normalized[normalized_account] = score.with_account(normalized_account)

    return normalized


class AccountNormalizer:
    """Holds a threshold and event sinks so normalization can be injected."""

    def __init__(
        self,
        min_weight: float = DEFAULT_MIN_WEIGHT,
        on_collision: Optional[CollisionCallback] = None,
        on_skip: Optional[SkipCallback] = None
    ):
        if min_weight < 0:
            raise ValueError(f"Minimum weight must be non-negative, got {min_weight}")
        self.min_weight = min_weight
        self.on_collision = on_collision
        self.on_skip = on_skip

    def normalize(self, raw: Mapping[str, AccountScore]) -> AccountScoreTable:
        return normalize(
            raw,
            min_weight=self.min_weight,
            on_collision=self.on_collision,
            on_skip=self.on_skip
        )
