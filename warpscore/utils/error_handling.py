"""
Error handling utilities for consistent error patterns across the scoreboard.

Defines the exception hierarchy for fatal run failures and small helpers
that log an error with context before raising it.
"""

import bittensor as bt
from typing import Any, Dict, Optional


class ScoreboardError(Exception):
    """Base class for fatal scoreboard run failures."""


class ConfigurationError(ScoreboardError):
    """Invalid or incomplete configuration (networks, contracts, settings)."""


class UnsupportedNetworkError(ConfigurationError):
    """Raised when a network id is not in the network registry."""

    def __init__(self, network_id: Any):
        self.network_id = network_id
        super().__init__(f"Unsupported network id: '{network_id}'")


class ContractNotConfiguredError(ConfigurationError):
    """Raised when a known contract has no address on the requested network."""

    def __init__(self, network_id: Any, contract: str):
        self.network_id = network_id
        self.contract = contract
        super().__init__(f"Contract '{contract}' is not configured on network '{network_id}'")


class InputError(ScoreboardError):
    """Unreadable or unparsable account score input."""


class TeamSourceError(ScoreboardError):
    """Team membership could not be fetched or parsed."""


def log_and_raise_config_error(
    message: str,
    config_key: Optional[str] = None,
    config_value: Optional[str] = None
) -> None:
    """
    Log configuration error and raise ConfigurationError.

    Args:
        message: Error message describing the configuration issue
        config_key: The configuration key that's problematic
        config_value: The problematic value (will be sanitized)

    Raises:
        ConfigurationError: Always raises with formatted message
    """
    # Sanitize config value
    safe_value = config_value
    if config_value and any(sensitive in str(config_key).lower()
                           for sensitive in ['key', 'token', 'password', 'secret']):
        safe_value = '***REDACTED***'

    bt.logging.error(
        f"Configuration error: {message}",
        extra={'config_key': config_key, 'config_value': safe_value}
    )

    raise ConfigurationError(f"{message} (config_key: {config_key})")


def log_and_raise_input_error(
    error: Exception,
    source: str,
    context: str = "Loading input"
) -> None:
    """
    Log input error with context and raise InputError.

    Args:
        error: The original exception
        source: File path or other source that failed
        context: Additional context for the error

    Raises:
        InputError: Always raises, chained to the original exception
    """
    bt.logging.error(
        f"{context} failed: {error}",
        extra={
            'source': source,
            'error_type': type(error).__name__
        }
    )

    raise InputError(f"{context} failed for {source}: {error}") from error


def log_and_raise_team_source_error(
    error: Exception,
    endpoint: str,
    params: Optional[Dict[str, Any]] = None,
    context: str = "Team membership fetch"
) -> None:
    """
    Log team source error with context and raise TeamSourceError.

    Args:
        error: The original exception
        endpoint: Endpoint or path that failed
        params: Request parameters (will be sanitized)
        context: Additional context for the error

    Raises:
        TeamSourceError: Always raises, chained to the original exception
    """
    # Sanitize params to avoid logging sensitive data
    safe_params = {}
    if params:
        safe_params = {k: v for k, v in params.items()
                      if k.lower() not in ['api_key', 'token', 'password', 'secret']}

    bt.logging.error(
        f"{context} failed: {error}",
        extra={
            'endpoint': endpoint,
            'params': safe_params,
            'error_type': type(error).__name__
        }
    )

    raise TeamSourceError(f"{context} failed for {endpoint}: {error}") from error
