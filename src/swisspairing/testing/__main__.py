"""Testing CLI for Swiss Pairing.

Plays a random tournament and prints every round and the final standings.

    python -m swisspairing.testing --players 9 --seed 42
"""

# Swiss Pairing
# Copyright (C) 2025  Swiss Pairing developers
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
import sys
from pathlib import Path
from typing import Dict, List, Optional

from swisspairing.constants import (
    BYE,
    TB_MATCH_WIN_PERCENTAGE,
    TB_STRENGTH_OF_SCHEDULE,
    TB_SUM_OF_OPPONENT_SOS,
    TIEBREAK_NAMES,
)
from swisspairing.exceptions import SwissPairingException
from swisspairing.models import Player, Round
from swisspairing.testing.rtg import RandomTournamentGenerator, RTGConfig
from swisspairing.type_hints import OpponentId, PlayerId
from swisspairing.utils import set_log_level, setup_logger

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKGREEN = "\033[92m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m swisspairing.testing",
        description="Play a random Swiss tournament and show the pairings",
    )
    parser.add_argument(
        "--players", type=int, default=8, help="Number of players (default: 8)"
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=None,
        help="Number of rounds (default: ceil(log2(players)))",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--draw-percentage",
        type=int,
        default=10,
        help="Chance of a drawn match, in percent (default: 10)",
    )
    parser.add_argument("--output", type=Path, help="Write the tournament as JSON")
    parser.add_argument(
        "--verbose", action="store_true", help="Show debug logging from the engine"
    )
    return parser


def _name(names: Dict[PlayerId, str], player_id: OpponentId) -> str:
    if player_id == BYE:
        return "BYE"
    return names.get(player_id, "Unknown Player")


def print_round(round_data: Round, names: Dict[PlayerId, str]) -> None:
    print(f"\n{Colors.BOLD}Round {round_data.round_number}{Colors.ENDC}")
    for match in round_data.pairings:
        result = str(match.result) if match.result else "pending"
        print(
            f"  Table {match.table:>3}  "
            f"{_name(names, match.player1_id):>20}  {result:^7}  "
            f"{_name(names, match.player2_id)}"
        )


def print_standings(players: List[Player]) -> None:
    print(f"\n{Colors.BOLD}Final Standings{Colors.ENDC}")
    mwp, sos, sosos = (
        TIEBREAK_NAMES[key]
        for key in (
            TB_MATCH_WIN_PERCENTAGE,
            TB_STRENGTH_OF_SCHEDULE,
            TB_SUM_OF_OPPONENT_SOS,
        )
    )
    print(f"  {'#':>3}  {'Player':<20} {'Pts':>4} {mwp:>6} {sos:>5} {sosos:>6}")
    for rank, player in enumerate(players, start=1):
        tb = player.tiebreakers
        print(
            f"  {rank:>3}  {player.name:<20} {player.points:>4} "
            f"{tb.match_win_percentage:>6.3f} {tb.strength_of_schedule:>5} "
            f"{tb.sum_of_opponent_strength_of_schedule:>6}"
        )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_log_level("DEBUG")

    config = RTGConfig(
        num_players=args.players,
        num_rounds=args.rounds,
        seed=args.seed,
        draw_percentage=args.draw_percentage,
    )

    try:
        report = RandomTournamentGenerator(config).generate_complete_tournament()
    except (SwissPairingException, ValueError) as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}", file=sys.stderr)
        return 1

    tournament = report["tournament"]
    names = tournament.player_names()
    for round_data in tournament.rounds:
        print_round(round_data, names)
    print_standings(tournament.players)

    print(
        f"\n{Colors.OKGREEN}Repeat pairings: {report['repeat_pairings']}{Colors.ENDC}"
    )

    if args.output:
        payload = {
            "tournament": tournament.to_dict(),
            "repeat_pairings": report["repeat_pairings"],
            "byes_per_player": report["byes_per_player"],
        }
        args.output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        logger.info("Wrote tournament to %s", args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
