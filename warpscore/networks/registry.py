"""
Registry of supported networks, their contract addresses and known tokens.

The registry is built once at import time from constants and environment
variables and is read-only afterwards. Addresses that are not configured on
a network are stored as None.
"""

import os
import re
from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Any, List, Mapping, Optional
import bittensor as bt

from warpscore.utils.error_handling import (
    ContractNotConfiguredError,
    UnsupportedNetworkError,
    log_and_raise_config_error,
)

ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")


def _env_address(variable: str) -> Optional[str]:
    """Read an address from the environment; unset or blank means absent."""
    value = os.getenv(variable, '').strip()
    return value or None


class NetworkId(IntEnum):
    MAINNET = 1
    KOVAN = 42
    LOCALHOST = 1337


@dataclass(frozen=True)
class NetworkContracts:
    warp_control: Optional[str] = None


@dataclass(frozen=True)
class Network:
    label: str
    contracts: NetworkContracts


@dataclass(frozen=True)
class KnownToken:
    """Token metadata with per-network addresses."""
    symbol: str
    decimals: int
    addresses: Mapping[NetworkId, Optional[str]]
    order: int
    lp: bool
    disabled: bool = False

    def address_on(self, network_id: NetworkId) -> Optional[str]:
        return self.addresses.get(network_id)


@dataclass(frozen=True)
class Token:
    """A known token resolved for a specific network."""
    symbol: str
    decimals: int
    address: str
    is_lp: bool


KNOWN_CONTRACTS = tuple(NetworkContracts.__dataclass_fields__)

NETWORKS: Mapping[NetworkId, Network] = MappingProxyType({
    NetworkId.MAINNET: Network(
        label='Mainnet',
        contracts=NetworkContracts(warp_control='0xcc8d17feeb20969523f096797c3d5c4a490ed9a8'),
    ),
    NetworkId.KOVAN: Network(
        label='Kovan',
        contracts=NetworkContracts(warp_control='0xD3C55cB30D1D9c9A879481588C88E5E9ccB04A7B'),
    ),
    NetworkId.LOCALHOST: Network(
        label='ganache',
        contracts=NetworkContracts(warp_control=_env_address('LOCALHOST_CONTROL')),
    ),
})


def _addresses(mainnet: str, kovan: str, localhost_env: str) -> Mapping[NetworkId, Optional[str]]:
    return MappingProxyType({
        NetworkId.MAINNET: mainnet,
        NetworkId.KOVAN: kovan,
        NetworkId.LOCALHOST: _env_address(localhost_env),
    })


KNOWN_TOKENS: Mapping[str, KnownToken] = MappingProxyType({
    'dai': KnownToken(
        symbol='DAI',
        decimals=18,
        addresses=_addresses(
            '0x6b175474e89094c44da98b954eedeac495271d0f',
            '0x48141e4C9581524AE20845C5681B43F2E99A3e0f',
            'LOCALHOST_DAI',
        ),
        order=1,
        lp=False,
    ),
    'usdc': KnownToken(
        symbol='USDC',
        decimals=6,
        addresses=_addresses(
            '0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48',
            '0xF46964c3aD4aEb8BA9304394e0594FF79f9A3BdA',
            'LOCALHOST_USDC',
        ),
        order=2,
        lp=False,
    ),
    'usdt': KnownToken(
        symbol='USDT',
        decimals=6,
        addresses=_addresses(
            '0xdac17f958d2ee523a2206206994597c13d831ec7',
            '0x74D60183Acd8191660F87E7D7acd2867f65ae19d',
            'LOCALHOST_USDT',
        ),
        order=3,
        lp=False,
        disabled=True,
    ),
    'eth-dai': KnownToken(
        symbol='ETH-DAI',
        decimals=18,
        addresses=_addresses(
            '0xa478c2975ab1ea89e8196811f51a7b7ade33eb11',
            '0x1dE8E2c7bcee34B35480fF9621F2031C830A6C82',
            'LOCALHOST_ETH_DAI',
        ),
        order=4,
        lp=True,
    ),
    'eth-usdt': KnownToken(
        symbol='ETH-USDT',
        decimals=18,
        addresses=_addresses(
            '0x0d4a11d5eeaac28ec3f61d100daf4d40471f1852',
            '0x9826336Bfee65f3145443a90781B220e83a8026D',
            'LOCALHOST_ETH_USDT',
        ),
        order=5,
        lp=True,
    ),
    'eth-usdc': KnownToken(
        symbol='ETH-USDC',
        decimals=18,
        addresses=_addresses(
            '0xb4e16d0168e52d35cacd2c6185b44281ec28c9dc',
            '0x03f71cdD28840FB422307e77089D599196aa059E',
            'LOCALHOST_ETH_USDC',
        ),
        order=6,
        lp=True,
    ),
    'eth-wbtc': KnownToken(
        symbol='ETH-wBTC',
        decimals=18,
        addresses=_addresses(
            '0xbb2b8038a1640196fbe3e38816f3e67cba72d940',
            '0x4dDEc38c9A30f32bC66790DbBe1F1c7bb4e9F731',
            'LOCALHOST_ETH_WBTC',
        ),
        order=7,
        lp=True,
    ),
})


def resolve_network_id(network_id: Any) -> NetworkId:
    """
    Map a raw network id onto the closed NetworkId enumeration.

    Raises:
        UnsupportedNetworkError: If the id is not a supported network
    """
    try:
        return NetworkId(int(network_id))
    except (TypeError, ValueError):
        bt.logging.error(f"Unsupported network id: '{network_id}'")
        raise UnsupportedNetworkError(network_id) from None


def supported_network_ids() -> List[NetworkId]:
    return list(NETWORKS.keys())


def validate_registry(networks: Mapping[NetworkId, Network] = NETWORKS,
                      tokens: Mapping[str, KnownToken] = KNOWN_TOKENS) -> None:
    """
    Check every configured address in the registry is well formed.

    Absent (None) addresses are allowed; anything else must be a 0x-prefixed
    40 hex digit string.

    Raises:
        ConfigurationError: On the first malformed address
    """
    for network_id, network in networks.items():
        for contract in KNOWN_CONTRACTS:
            address = getattr(network.contracts, contract)
            if address is not None and not ADDRESS_PATTERN.match(address):
                log_and_raise_config_error(
                    f"Malformed {contract} address on {network.label}: '{address}'",
                    config_key=f"{network_id.name}.{contract}",
                    config_value=address
                )

    for name, token in tokens.items():
        for network_id, address in token.addresses.items():
            if address is not None and not ADDRESS_PATTERN.match(address):
                log_and_raise_config_error(
                    f"Malformed {token.symbol} address on network {int(network_id)}: '{address}'",
                    config_key=f"{name}.{network_id.name}",
                    config_value=address
                )

    bt.logging.debug(f"Network registry valid: {[n.label for n in networks.values()]}")


def get_contract_address(network_id: Any, contract: str) -> str:
    """
    Look up a contract address on a network.

    Args:
        network_id: Network identifier (int or NetworkId)
        contract: Contract name, e.g. 'warp_control'

    Returns:
        Configured contract address

    Raises:
        UnsupportedNetworkError: Network id not in the registry
        ConfigurationError: Unknown contract name
        ContractNotConfiguredError: Contract has no address on this network
    """
    network_id = resolve_network_id(network_id)

    if contract not in KNOWN_CONTRACTS:
        log_and_raise_config_error(f"Unknown contract '{contract}'", config_key=contract)

    address = getattr(NETWORKS[network_id].contracts, contract)
    if address is None:
        bt.logging.error(f"Contract '{contract}' is not configured on {NETWORKS[network_id].label}")
        raise ContractNotConfiguredError(int(network_id), contract)

    return address


def get_tokens_by_network(network_id: Any, lp: bool = False) -> List[Token]:
    """
    List enabled known tokens that have an address on the given network.

    Args:
        network_id: Network identifier (int or NetworkId)
        lp: Select liquidity pool tokens instead of plain tokens

    Returns:
        Tokens sorted by their configured order

    Raises:
        UnsupportedNetworkError: Network id not in the registry
    """
    network_id = resolve_network_id(network_id)
    lp = bool(lp)

    tokens = []
    for known in sorted(KNOWN_TOKENS.values(), key=lambda t: t.order):
        if known.lp != lp or known.disabled:
            continue
        address = known.address_on(network_id)
        if address is None:
            continue
        tokens.append(Token(
            symbol=known.symbol,
            decimals=known.decimals,
            address=address,
            is_lp=lp,
        ))

    return tokens
