"""Tests for the network and contract registry."""

import pytest
from types import MappingProxyType
from unittest.mock import patch

from warpscore.networks import registry
from warpscore.networks.registry import (
    KnownToken,
    Network,
    NetworkContracts,
    NetworkId,
    get_contract_address,
    get_tokens_by_network,
    resolve_network_id,
    supported_network_ids,
    validate_registry,
)
from warpscore.utils.error_handling import (
    ConfigurationError,
    ContractNotConfiguredError,
    UnsupportedNetworkError,
)


class TestContractAddress:
    """Tests for contract address lookup."""

    def test_mainnet_control_address(self):
        assert get_contract_address(1, 'warp_control') == '0xcc8d17feeb20969523f096797c3d5c4a490ed9a8'

    def test_accepts_enum_member(self):
        assert get_contract_address(NetworkId.KOVAN, 'warp_control') == '0xD3C55cB30D1D9c9A879481588C88E5E9ccB04A7B'

    def test_unsupported_network_raises_error(self):
        with pytest.raises(UnsupportedNetworkError, match="Unsupported network id: '3'"):
            get_contract_address(3, 'warp_control')

    def test_unsupported_network_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            get_contract_address('ropsten', 'warp_control')

    def test_unknown_contract_raises_error(self):
        with pytest.raises(ConfigurationError, match="Unknown contract"):
            get_contract_address(1, 'warpVault')

    def test_absent_contract_raises_error(self):
        networks = MappingProxyType({
            NetworkId.LOCALHOST: Network(label='ganache', contracts=NetworkContracts()),
        })
        with patch.object(registry, 'NETWORKS', networks):
            with pytest.raises(ContractNotConfiguredError):
                get_contract_address(1337, 'warp_control')


class TestNetworkIds:

    def test_supported_ids(self):
        assert supported_network_ids() == [NetworkId.MAINNET, NetworkId.KOVAN, NetworkId.LOCALHOST]

    def test_resolve_from_string(self):
        assert resolve_network_id('42') is NetworkId.KOVAN


class TestTokensByNetwork:
    """Tests for known token filtering."""

    def test_plain_tokens_on_mainnet_exclude_disabled(self):
        tokens = get_tokens_by_network(1, lp=False)

        assert [t.symbol for t in tokens] == ['DAI', 'USDC']
        assert all(not t.is_lp for t in tokens)

    def test_lp_tokens_sorted_by_order(self):
        tokens = get_tokens_by_network(NetworkId.KOVAN, lp=True)

        assert [t.symbol for t in tokens] == ['ETH-DAI', 'ETH-USDT', 'ETH-USDC', 'ETH-wBTC']
        assert all(t.is_lp for t in tokens)
        assert tokens[0].address == '0x1dE8E2c7bcee34B35480fF9621F2031C830A6C82'

    def test_tokens_without_address_are_skipped(self):
        tokens = MappingProxyType({
            'dai': KnownToken('DAI', 18, {NetworkId.MAINNET: '0x' + 'a' * 40, NetworkId.LOCALHOST: None}, 1, False),
            'usdc': KnownToken('USDC', 6, {NetworkId.MAINNET: '0x' + 'b' * 40}, 2, False),
        })
        with patch.object(registry, 'KNOWN_TOKENS', tokens):
            assert get_tokens_by_network(1337) == []
            assert [t.symbol for t in get_tokens_by_network(1)] == ['DAI', 'USDC']

    def test_unsupported_network_raises_error(self):
        with pytest.raises(UnsupportedNetworkError):
            get_tokens_by_network(5)


class TestValidateRegistry:
    """Tests for startup validation."""

    def test_builtin_registry_is_valid(self):
        validate_registry()

    def test_malformed_contract_address_raises_error(self):
        networks = {NetworkId.MAINNET: Network('Mainnet', NetworkContracts(warp_control='not-an-address'))}

        with pytest.raises(ConfigurationError, match="Malformed warp_control address"):
            validate_registry(networks=networks, tokens={})

    def test_malformed_token_address_raises_error(self):
        tokens = {'dai': KnownToken('DAI', 18, {NetworkId.KOVAN: '0x123'}, 1, False)}

        with pytest.raises(ConfigurationError, match="Malformed DAI address"):
            validate_registry(networks={}, tokens=tokens)

    def test_absent_addresses_are_valid(self):
        networks = {NetworkId.LOCALHOST: Network('ganache', NetworkContracts())}

        validate_registry(networks=networks, tokens={})
