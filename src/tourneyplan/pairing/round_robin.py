"""Round robin schedule generation using the circle method."""

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

from typing import Iterable, List, Optional

from tourneyplan.constants import MIN_PLAYERS
from tourneyplan.models.entrant import BYE, Competitor, Entrant, as_entrants
from tourneyplan.models.match import MatchPairing
from tourneyplan.type_hints import PlayerId
from tourneyplan.utils import setup_logger
from tourneyplan.utils.validation import unique_players

logger = setup_logger(__name__)


def _rotate(seats: List[Entrant]) -> List[Entrant]:
    """Keep the first seat fixed and shift the others one place clockwise."""
    return [seats[0], seats[-1]] + seats[1:-1]


def generate_round_robin(
    players: Iterable[PlayerId], group: Optional[str] = None
) -> List[MatchPairing]:
    """Generate every pairing of a single round robin.

    An odd field gets one bye seat; pairings against it are dropped, so the
    player facing the bye sits out that round. Every unordered pair of
    players meets exactly once over ``n - 1`` rounds (``n`` counting the
    bye).

    Args:
        players: Ordered player identifiers
        group: Optional group label copied onto every pairing

    Returns:
        Pairings ordered by round, then by board

    Raises:
        DuplicatePlayerException: If a player is listed twice

    Example:
        >>> [(m.player1, m.player2, m.round) for m in generate_round_robin("ABCD")][:2]
        [('A', 'D', 1), ('B', 'C', 1)]
    """
    roster = unique_players(players, context="round robin")
    if len(roster) < MIN_PLAYERS:
        return []

    seats = as_entrants(roster)
    if len(seats) % 2:
        seats.append(BYE)

    total_rounds = len(seats) - 1
    boards = len(seats) // 2
    matches: List[MatchPairing] = []

    for round_index in range(total_rounds):
        for board in range(boards):
            home = seats[board]
            away = seats[len(seats) - 1 - board]
            if isinstance(home, Competitor) and isinstance(away, Competitor):
                matches.append(
                    MatchPairing(
                        player1=home.player_id,
                        player2=away.player_id,
                        round=round_index + 1,
                        group=group,
                    )
                )
        seats = _rotate(seats)

    logger.debug(
        "Round robin%s: %d players, %d rounds, %d matches",
        f" for group {group}" if group else "",
        len(roster),
        total_rounds,
        len(matches),
    )
    return matches
