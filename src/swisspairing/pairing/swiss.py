"""Swiss Pairing System Implementation.

Players are grouped by match points and paired inside their group,
greedily and first-fit, avoiding opponents they have already met. Odd
groups push one player down into the next group. This is deliberately not
an optimal matching: an early choice can leave a later pair with nothing
but a rematch, and the rematch is then accepted.
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

import random
from typing import Dict, Iterable, List, Optional, Sequence

from swisspairing.models.match import Match
from swisspairing.models.pairing_history import PairingHistory
from swisspairing.models.player import Player
from swisspairing.models.round_data import Round
from swisspairing.tournament.standings import calculate_standings
from swisspairing.type_hints import MaybePlayer, Pairing
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


def generate_pairings(
    players: Sequence[Player],
    existing_rounds: Iterable[Round],
    rng: Optional[random.Random] = None,
) -> List[Match]:
    """
    Create the matches of the next Swiss round.

    - players: tournament roster
    - existing_rounds: every round already paired, in order
    - rng: source for the in-group shuffle; pass a seeded (or stubbed)
      ``random.Random`` for reproducible pairings
    Returns: the new round's matches, table-numbered from 1, bye last.
    Neither argument is modified.
    """
    rounds = list(existing_rounds)
    if rng is None:
        rng = random.Random()

    pool = calculate_standings(players, rounds)
    bye_player = _select_bye_player(pool)
    history = PairingHistory.from_rounds(rounds)

    pairings = _pair_score_groups(pool, history, rng)

    matches = [
        Match.pending(table=0, player1_id=p1.id, player2_id=p2.id)
        for p1, p2 in pairings
    ]
    if bye_player is not None:
        matches.append(Match.bye(table=0, player_id=bye_player.id))

    logger.debug(
        "Paired %s tables for round %s (bye: %s)",
        len(pairings),
        len(rounds) + 1,
        bye_player.id if bye_player else None,
    )
    return [match.with_table(index) for index, match in enumerate(matches, start=1)]


def _select_bye_player(ranked: List[Player]) -> MaybePlayer:
    """Take the bye recipient out of ``ranked`` when the field is odd.

    The lowest-ranked player without a bye gets it. Once everyone has had
    one, the lowest-ranked player gets another.
    """
    if len(ranked) % 2 == 0:
        return None

    for index in range(len(ranked) - 1, -1, -1):
        if ranked[index].byes == 0:
            return ranked.pop(index)

    logger.debug("Every player has had a bye, giving another to the last place")
    return ranked.pop()


def _group_players_by_score(players: List[Player]) -> Dict[int, List[Player]]:
    """Group players by their current points, keeping their order"""
    score_groups: Dict[int, List[Player]] = {}
    for player in players:
        score_groups.setdefault(player.points, []).append(player)
    return score_groups


def _pair_score_groups(
    players: List[Player], history: PairingHistory, rng: random.Random
) -> List[Pairing]:
    """Pair every score group from the top down, floating odd players down."""
    score_groups = _group_players_by_score(players)
    pairings: List[Pairing] = []
    floater: MaybePlayer = None

    for score in sorted(score_groups, reverse=True):
        bracket = list(score_groups[score])
        if floater is not None:
            bracket.append(floater)
            floater = None

        rng.shuffle(bracket)

        if len(bracket) % 2 == 1:
            floater = bracket.pop()
            logger.debug("Player %s floats down from %s points", floater.id, score)

        pairings.extend(_greedy_pair_bracket(bracket, history))

    if floater is not None:
        # Only reachable with an odd pool, which the bye rules out
        logger.warning("Player %s was left without an opponent", floater.id)

    return pairings


def _greedy_pair_bracket(
    bracket: List[Player], history: PairingHistory
) -> List[Pairing]:
    """First-fit pairing inside one score group.

    Each player in turn takes the first remaining player they have not met;
    if they have met everyone left, they take the next player anyway.
    """
    pairings: List[Pairing] = []
    remaining = bracket.copy()

    while len(remaining) >= 2:
        player1 = remaining.pop(0)

        for i, player2 in enumerate(remaining):
            if not history.have_played(player1.id, player2.id):
                pairings.append((player1, remaining.pop(i)))
                break
        else:
            player2 = remaining.pop(0)
            logger.debug(
                "No new opponent left for player %s, repeating against %s",
                player1.id,
                player2.id,
            )
            pairings.append((player1, player2))

    return pairings
