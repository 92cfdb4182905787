"""
Command-line tool to build the team scoreboard from an account scores file.

Usage:
    python -m warpscore.scoreboard.score_teams accountScores.json
    python -m warpscore.scoreboard.score_teams accountScores.json --network-id 42
    python -m warpscore.scoreboard.score_teams accountScores.json --teams-file teams.json
"""
import asyncio
import argparse
import sys
from pathlib import Path
from typing import Any, Mapping, Optional
import bittensor as bt

from warpscore.clients import FileTeamSource, TeamMembershipClient
from warpscore.networks.registry import get_contract_address, resolve_network_id, validate_registry
from warpscore.scoreboard.interfaces.team_source import TeamSource
from warpscore.scoreboard.models.account_score import parse_account_scores
from warpscore.scoreboard.orchestrator import ScoreboardOrchestrator, log_collision, log_skip
from warpscore.scoreboard.services.account_normalizer import AccountNormalizer
from warpscore.utils import config as settings
from warpscore.utils.error_handling import ScoreboardError, log_and_raise_input_error
from warpscore.utils.logging import (
    record_below_threshold,
    record_duplicate_account,
    setup_events_logger,
)
from warpscore.utils.report_io import load_account_scores, output_file


def build_team_source(network_id: int, teams_file: Optional[str] = None,
                      indexer_url: Optional[str] = None) -> TeamSource:
    """File source when a teams file is given, otherwise the indexer client for the network's control contract."""
    if teams_file:
        return FileTeamSource(teams_file)

    control_address = get_contract_address(network_id, 'warp_control')
    bt.logging.info(f"Using control contract {control_address} on network {network_id}")
    return TeamMembershipClient(control_address, base_url=indexer_url)


def build_normalizer(min_weight: float, events_logger=None) -> AccountNormalizer:
    if events_logger is None:
        return AccountNormalizer(min_weight=min_weight, on_collision=log_collision, on_skip=log_skip)

    def on_collision(normalized_account: str, raw_account: str) -> None:
        log_collision(normalized_account, raw_account)
        record_duplicate_account(events_logger, normalized_account, raw_account)

    def on_skip(account: str, weighted_score: float) -> None:
        log_skip(account, weighted_score)
        record_below_threshold(events_logger, account, weighted_score, min_weight)

    return AccountNormalizer(min_weight=min_weight, on_collision=on_collision, on_skip=on_skip)


async def score_teams(
    account_scores: Mapping[str, Mapping[str, Any]],
    network_id: Optional[int] = None,
    min_weight: Optional[float] = None,
    output_dir: Optional[Path] = None,
    team_source: Optional[TeamSource] = None,
    events_logger=None
) -> Path:
    """
    Score teams for parsed account scores and write the report.

    Args:
        account_scores: Parsed input JSON, account -> {"weightedScore": ...}
        network_id: Network to read teams from (default: NETWORK_ID setting)
        min_weight: Inclusion threshold (default: MIN_ACCOUNT_WEIGHT setting)
        output_dir: Report directory (default: OUTPUT_DIR setting)
        team_source: Team membership source (default: indexer client)
        events_logger: Optional events logger for data-quality events

    Returns:
        Path to the written report
    """
    network_id = resolve_network_id(settings.NETWORK_ID if network_id is None else network_id)
    min_weight = settings.MIN_ACCOUNT_WEIGHT if min_weight is None else min_weight

    try:
        raw_accounts = parse_account_scores(account_scores)
    except ValueError as e:
        log_and_raise_input_error(e, "account scores", context="Validating account scores")

    orchestrator = ScoreboardOrchestrator(
        team_source=team_source or build_team_source(network_id),
        network_id=int(network_id),
        normalizer=build_normalizer(min_weight, events_logger)
    )
    report = await orchestrator.run(raw_accounts)

    return output_file(
        settings.REPORT_LABEL,
        report.to_json(),
        output_dir or settings.OUTPUT_DIR
    )


async def run_score_teams(config) -> int:
    """
    Run a scoreboard from parsed CLI config.

    Returns:
        Process exit code: 0 on success, 1 on any failure (no report written)
    """
    if not config.filepath:
        bt.logging.error(
            "a 'filepath' parameter is required. Pass in the name of the data json file in the cli"
        )
        return 1

    try:
        validate_registry()
        network_id = resolve_network_id(config.network_id)

        account_scores = load_account_scores(config.filepath)

        events_logger = None
        if config.events_dir:
            events_logger = setup_events_logger(
                config.events_dir, settings.EVENTS_RETENTION_SIZE, network_id=int(network_id)
            )

        team_source = build_team_source(network_id, config.teams_file, config.indexer_url)

        await score_teams(
            account_scores,
            network_id=network_id,
            min_weight=config.min_weight,
            output_dir=Path(config.output_dir) if config.output_dir else None,
            team_source=team_source,
            events_logger=events_logger
        )
        return 0

    except ScoreboardError as e:
        bt.logging.error(f"Scoreboard run failed: {e}")
        return 1
    except Exception as e:
        bt.logging.error(f"Unexpected error: {e}")
        return 1


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Build the team scoreboard from an account scores JSON file"
    )
    bt.logging.add_args(parser)

    parser.add_argument(
        "filepath",
        nargs="?",
        default=None,
        help="Path to the account scores JSON file"
    )

    parser.add_argument(
        "--network-id",
        type=int,
        default=settings.NETWORK_ID,
        help="Network to read team membership from (1, 42 or 1337)"
    )

    parser.add_argument(
        "--min-weight",
        type=float,
        default=settings.MIN_ACCOUNT_WEIGHT,
        help="Ignore accounts with a weighted score below this value"
    )

    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory to write the report to (default: OUTPUT_DIR)"
    )

    parser.add_argument(
        "--teams-file",
        type=str,
        default=None,
        help="Read team membership from a JSON file instead of the team indexer"
    )

    parser.add_argument(
        "--indexer-url",
        type=str,
        default=None,
        help="Override team indexer URL from environment"
    )

    parser.add_argument(
        "--events-dir",
        type=str,
        default=None,
        help="Record data-quality events to a rotating log in this directory"
    )

    return bt.config(parser, args=argv)


def main(argv=None) -> int:
    """Main entry point for CLI."""
    try:
        config = parse_args(argv)
        bt.logging.set_config(config=config.logging)
        return asyncio.run(run_score_teams(config))
    except KeyboardInterrupt:
        bt.logging.info("\nScoring cancelled by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
