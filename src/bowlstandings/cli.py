"""Command-line interface for computing standings.

This module loads a tournament snapshot from JSON and prints its standings.
"""

# Bowl Standings
# Copyright (C) 2025  Bowl Standings developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from bowlstandings.constants import TIEBREAK_NAMES
from bowlstandings.exceptions import (
    BowlStandingsException,
    ConfigurationException,
    FileLoadException,
)
from bowlstandings.models import StandingsConfig, StandingsReport
from bowlstandings.store import load_snapshot
from bowlstandings.tournament import compute_standings
from bowlstandings.utils import setup_logger

logger = setup_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIGURATION = 2


def positive_int(value: str) -> int:
    """Parse a positive integer argument.

    Raises:
        argparse.ArgumentTypeError: If the value is not a positive integer
    """
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid number '{value}'. Must be an integer")
    if number < 1:
        raise argparse.ArgumentTypeError(f"Value must be at least 1, got {number}")
    return number


def load_configuration(config_file: Optional[str]) -> StandingsConfig:
    """Load standings settings from a JSON file.

    Args:
        config_file: Path to configuration file, or None for defaults

    Returns:
        The configuration

    Raises:
        FileLoadException: If the file is missing or not valid JSON
        InvalidConfigurationException: If the file does not hold a JSON object
    """
    if not config_file:
        return StandingsConfig()

    config_path = Path(config_file)
    if not config_path.exists():
        raise FileLoadException(f"Configuration file not found: {config_file}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise FileLoadException(f"Failed to load configuration: {e}") from e

    logger.info("Loaded configuration from: %s", config_file)
    return StandingsConfig.from_dict(data)


def build_configuration(args: argparse.Namespace) -> StandingsConfig:
    """Configuration file values overridden by command-line flags."""
    config = load_configuration(args.config)
    if args.panel_size is not None:
        config.panel_size = args.panel_size
    if args.simulate_third_judge:
        config.simulate_third_judge = True
    if args.tiebreak_order:
        config.tiebreak_order = [key.strip() for key in args.tiebreak_order.split(",")]
    return config


def format_standings(report: StandingsReport) -> str:
    """Render a report as a plain-text table."""
    lines: List[str] = []
    through = (
        f" (through round {report.through_round})" if report.through_round else ""
    )
    lines.append(f"Standings for {report.tournament_id}{through}")
    lines.append("=" * 78)
    lines.append(
        f"{'Rank':>4}  {'Team':<24} {'MP':>3} {'Wins':>5} {'Diff':>9} {'Votes':>6}  Decided by"
    )
    lines.append("-" * 78)
    for standing in report.standings:
        record = standing.record
        decided_by = TIEBREAK_NAMES.get(standing.separated_by, "")
        lines.append(
            f"{standing.rank:>4}  {standing.team.name[:24]:<24} "
            f"{record.matches_played:>3} {record.win_share:>5.1f} "
            f"{record.score_differential:>+9.2f} {record.votes:>6.1f}  {decided_by}"
        )
    lines.append("-" * 78)
    lines.append(f"Matches used: {report.matches_used}")

    if report.coin_flips:
        lines.append("")
        lines.append("Coin flips:")
        for draw in report.coin_flips:
            lines.append(
                f"  {', '.join(draw.team_ids)} -> {' > '.join(draw.order)} (seed {draw.seed})"
            )

    if report.excluded_matches:
        lines.append("")
        lines.append("Excluded matches:")
        for excluded in report.excluded_matches:
            lines.append(
                f"  Round {excluded.round_number}, match {excluded.match_id}: {excluded.reason}"
            )

    return "\n".join(lines)


def run_standings(args: argparse.Namespace) -> int:
    """Compute and print standings for the snapshot named on the command line."""
    try:
        config = build_configuration(args)
        snapshot = load_snapshot(args.snapshot)
        report = compute_standings(
            snapshot, config=config, through_round=args.through_round, seed=args.seed
        )
    except ConfigurationException as e:
        logger.error("Configuration error: %s", e)
        return EXIT_CONFIGURATION
    except BowlStandingsException as e:
        logger.error("Standings failed: %s", e)
        return EXIT_FAILURE

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(format_standings(report))
    return EXIT_OK


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        description="Compute standings for a judged team tournament",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Standings after all completed matches
  bowl-standings tournament.json

  # Standings through round 3 with a fixed coin flip seed
  bowl-standings tournament.json --through-round 3 --seed 42

  # Two-judge panels with a simulated third judge
  bowl-standings tournament.json --panel-size 2 --simulate-third-judge

  # Votes before score differential
  bowl-standings tournament.json --tiebreak-order head_to_head,votes,score_differential
        """,
    )

    parser.add_argument("snapshot", help="Tournament snapshot JSON file")

    parser.add_argument(
        "--through-round",
        type=positive_int,
        help="Only count matches up to and including this round",
    )

    parser.add_argument(
        "--panel-size",
        type=positive_int,
        help="Judges per match (default: taken from the snapshot)",
    )

    parser.add_argument(
        "--simulate-third-judge",
        action="store_true",
        help="Add a simulated third ballot to two-judge panels",
    )

    parser.add_argument(
        "--tiebreak-order",
        help="Comma-separated tiebreaks (default: head_to_head,score_differential,votes)",
    )

    parser.add_argument("--seed", type=int, help="Random seed for coin flips")

    parser.add_argument("--config", help="Load configuration from JSON file")

    parser.add_argument(
        "--json", action="store_true", help="Print the full report as JSON"
    )

    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("bowlstandings").setLevel(logging.DEBUG)

    try:
        return run_standings(args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
