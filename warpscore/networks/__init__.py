"""Network and contract registry."""

from .registry import (
    NetworkId,
    Network,
    NetworkContracts,
    KnownToken,
    Token,
    NETWORKS,
    KNOWN_TOKENS,
    get_contract_address,
    get_tokens_by_network,
    resolve_network_id,
    supported_network_ids,
    validate_registry,
)

__all__ = [
    "NetworkId",
    "Network",
    "NetworkContracts",
    "KnownToken",
    "Token",
    "NETWORKS",
    "KNOWN_TOKENS",
    "get_contract_address",
    "get_tokens_by_network",
    "resolve_network_id",
    "supported_network_ids",
    "validate_registry",
]
