"""Command-line preview of a tournament structure.

Composes the stages for a list of players and prints them as JSON, in the
shape the persistence layer stores them.
"""

# Tourney Plan
# Copyright (C) 2025  Tourney Plan developers
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
import random
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from tourneyplan.constants import (
    DEFAULT_ADVANCING_PER_GROUP,
    DEFAULT_GROUP_COUNT,
    DEFAULT_ROUND_INTERVAL_DAYS,
)
from tourneyplan.exceptions import InvalidInputException
from tourneyplan.models.enums import SeedingType, TournamentType
from tourneyplan.models.stage import StageDescriptor, StructureConfig
from tourneyplan.tournament.scheduling import schedule_rounds, stage_window
from tourneyplan.tournament.structure import compose_structure
from tourneyplan.utils import ROOT_LOGGER_NAME, setup_logger

logger = setup_logger(__name__)


def read_players(args: argparse.Namespace) -> List[str]:
    """Collect player identifiers from the arguments and the players file.

    Blank lines and lines starting with ``#`` in the file are ignored.
    """
    players = list(args.players)
    if args.players_file:
        for line in Path(args.players_file).read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if line and not line.startswith("#"):
                players.append(line)
    return players


def stage_to_json(
    stage: StageDescriptor, start_date: Optional[str], interval_days: int
) -> Dict[str, Any]:
    """Serialize a stage, adding round dates when a start date is given."""
    data = stage.to_dict()
    if start_date and stage.matches:
        scheduled = schedule_rounds(stage.matches, start_date, interval_days)
        data["matches"] = [s.to_dict() for s in scheduled]
        first, last = stage_window(stage.matches, start_date, interval_days)
        data["startDate"] = first.isoformat()
        data["endDate"] = last.isoformat() if last else None
    return data


def run(args: argparse.Namespace) -> int:
    players = read_players(args)
    config = StructureConfig(
        group_count=args.groups,
        advancing_per_group=args.advancing,
        seeding=SeedingType(args.seeding) if args.seeding else None,
    )
    rng = random.Random(args.seed) if args.seed is not None else None

    stages = compose_structure(args.format, players, config, rng)
    output = {
        "type": args.format,
        "players": players,
        "stages": [
            stage_to_json(stage, args.start_date, args.interval_days)
            for stage in stages
        ],
    }
    print(json.dumps(output, indent=args.indent))
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="tourneyplan",
        description="Preview the stages and matches of a tournament structure",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Round robin league for four players
  tourneyplan --format LEAGUE alice bob carol dave

  # Ranked knockout bracket from a file, best player first
  tourneyplan --format KNOCKOUT --seeding RANKING --players-file seeds.txt

  # Two groups, top two advance, weekly rounds from 1 March
  tourneyplan --format GROUP_KNOCKOUT --groups 2 --advancing 2 \\
      --start-date 2025-03-01 p1 p2 p3 p4 p5 p6 p7 p8
        """,
    )

    parser.add_argument("players", nargs="*", help="Player identifiers in seed order")
    parser.add_argument(
        "--players-file", help="File with one player identifier per line"
    )
    parser.add_argument(
        "--format",
        choices=[t.value for t in TournamentType],
        default=TournamentType.LEAGUE.value,
        help="Tournament format (default: LEAGUE)",
    )
    parser.add_argument(
        "--groups",
        type=int,
        default=DEFAULT_GROUP_COUNT,
        help=f"Number of groups for GROUP_KNOCKOUT (default: {DEFAULT_GROUP_COUNT})",
    )
    parser.add_argument(
        "--advancing",
        type=int,
        default=DEFAULT_ADVANCING_PER_GROUP,
        help=f"Players advancing per group (default: {DEFAULT_ADVANCING_PER_GROUP})",
    )
    parser.add_argument(
        "--seeding",
        choices=[s.value for s in SeedingType],
        help="Bracket seeding (default: RANDOM for KNOCKOUT, CROSS_GROUP after groups)",
    )
    parser.add_argument("--seed", type=int, help="Random seed for reproducibility")
    parser.add_argument(
        "--start-date", help="ISO date of the first round, adds scheduled dates"
    )
    parser.add_argument(
        "--interval-days",
        type=int,
        default=DEFAULT_ROUND_INTERVAL_DAYS,
        help=f"Days between rounds (default: {DEFAULT_ROUND_INTERVAL_DAYS})",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.DEBUG)

    try:
        return run(args)
    except InvalidInputException as e:
        logger.error("Invalid input: %s", e)
        return 2
    except OSError as e:
        logger.error("Cannot read players file: %s", e)
        return 2
    except Exception as e:
        logger.error("Structure preview failed: %s", e, exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
