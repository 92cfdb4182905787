"""
Global pytest configuration and fixtures.

Provides shared account/team data and keeps tests off the network.
"""

import httpx
import pytest
from unittest.mock import patch

from warpscore.scoreboard.models import AccountScore, Team


@pytest.fixture(autouse=True)
def block_network_access():
    """
    Auto-use fixture that fails any real HTTP request made without a mock transport.
    """
    original_init = httpx.AsyncClient.__init__

    def guarded_init(self, *args, **kwargs):
        if kwargs.get('transport') is None:
            raise RuntimeError("Tests must not perform real HTTP requests")
        original_init(self, *args, **kwargs)

    with patch('httpx.AsyncClient.__init__', guarded_init):
        yield


@pytest.fixture
def raw_account_scores():
    """Raw account table with a case-variant duplicate and a dust account."""
    return {
        "0xA": AccountScore("0xA", 0.02),
        "0xa": AccountScore("0xa", 0.03),
        "0xB": AccountScore("0xB", 0.005),
    }


@pytest.fixture
def sample_teams():
    return [
        Team(id="T1", members=("0xa",)),
        Team(id="T2", members=("0xc",)),
    ]


# Performance optimization: disable logging during tests unless explicitly enabled
@pytest.fixture(autouse=True)
def fast_logging():
    """
    Reduce logging verbosity during tests for better performance.
    """
    import logging
    import bittensor as bt

    # Set higher log level to reduce output during tests
    logging.getLogger().setLevel(logging.WARNING)
    bt.logging.set_debug(False)

    yield

    # Restore normal logging after tests
    logging.getLogger().setLevel(logging.INFO)
