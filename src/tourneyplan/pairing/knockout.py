"""Single elimination bracket generation.

The field is padded with byes up to the next power of two, seeded, and laid
out as a full bracket. Match ``i`` of round ``r`` always feeds match
``i // 2`` of round ``r + 1``; downstream progression relies on that
linkage.
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

import random
from typing import Iterable, List, Optional, Union

from tourneyplan.constants import MIN_PLAYERS
from tourneyplan.models.bracket import BracketSlot, Destination, SlotRef
from tourneyplan.models.entrant import BYE, Bye, Entrant, as_entrants, player_of
from tourneyplan.models.enums import MatchResultType, SeedingType
from tourneyplan.type_hints import PlayerId, RandomSource, SeedingTypeValue
from tourneyplan.utils import setup_logger
from tourneyplan.utils.validation import parse_enum, require_min_players, unique_players

logger = setup_logger(__name__)


def next_power_of_two(count: int) -> int:
    """Smallest power of two that is >= ``count`` (1 for counts below 2)."""
    size = 1
    while size < count:
        size *= 2
    return size


def bracket_rounds(bracket_size: int) -> int:
    """Number of rounds in a bracket of ``bracket_size`` seats."""
    return max(bracket_size.bit_length() - 1, 0)


def winner_destination(round_number: int, match_index: int, total_rounds: int) -> Destination:
    """Where the winner of a match goes: the next slot or the title."""
    if round_number >= total_rounds:
        return MatchResultType.WINS_TOURNAMENT
    return SlotRef(round_number + 1, match_index // 2)


def ranking_positions(bracket_size: int) -> List[int]:
    """Seed number placed at each bracket position.

    Built by repeatedly splitting each seed ``s`` into the pair
    ``(s, size - 1 - s)``, e.g. ``[0, 7, 3, 4, 1, 6, 2, 5]`` for eight seats.
    The top ``2**j`` seeds end up in different sections of size
    ``bracket_size / 2**j``, so seeds 0 and 1 can only meet in the final.

    This is the standard tennis draw order, not a plain top-versus-bottom
    fold of the seed list, which would let seeds 0 and 1 meet early.
    """
    positions = [0]
    while len(positions) < bracket_size:
        size = len(positions) * 2
        positions = [seed for s in positions for seed in (s, size - 1 - s)]
    return positions


def _seed(
    seats: List[Entrant], seeding: SeedingType, rng: Optional[RandomSource]
) -> List[Entrant]:
    if seeding is SeedingType.RANDOM:
        rng = rng if rng is not None else random.Random()
        shuffled = list(seats)
        rng.shuffle(shuffled)
        return shuffled
    if seeding is SeedingType.RANKING:
        return [seats[seed] for seed in ranking_positions(len(seats))]
    # CROSS_GROUP and CUSTOM arrive already in bracket order
    return list(seats)


def _opening_slot(home: Entrant, away: Entrant, match_index: int, total_rounds: int) -> BracketSlot:
    # A present player always takes the first seat of a bye slot
    if isinstance(home, Bye) and not isinstance(away, Bye):
        home, away = away, home
    return BracketSlot(
        round=1,
        match_number=match_index,
        result_for_winner=winner_destination(1, match_index, total_rounds),
        result_for_loser=MatchResultType.EXIT,
        player1=player_of(home),
        player2=player_of(away),
        bye=isinstance(away, Bye),
    )


def generate_knockout_bracket(
    players: Iterable[PlayerId],
    seeding: Union[SeedingType, SeedingTypeValue] = SeedingType.RANDOM,
    rng: Optional[RandomSource] = None,
) -> List[BracketSlot]:
    """Generate a full single elimination bracket.

    Args:
        players: Ordered player identifiers. For RANKING they must be sorted
            best first; for CROSS_GROUP and CUSTOM the order is the bracket
            order.
        seeding: Seeding policy (member or wire value)
        rng: Random source used by RANDOM seeding, e.g. ``random.Random(7)``

    Returns:
        ``bracket_size - 1`` slots ordered by round, then match number.
        Only opening-round slots carry players; a bye slot holds its player
        in ``player1`` and links onwards like any other match.

    Raises:
        InsufficientPlayersException: If fewer than two players are given
        DuplicatePlayerException: If a player is listed twice
        UnknownEnumValueException: If the seeding policy is unknown
    """
    seeding = parse_enum(SeedingType, seeding)
    roster = unique_players(players, context="knockout bracket")
    require_min_players(roster, MIN_PLAYERS, "A knockout bracket")

    bracket_size = next_power_of_two(len(roster))
    total_rounds = bracket_rounds(bracket_size)
    seats = as_entrants(roster) + [BYE] * (bracket_size - len(roster))
    seats = _seed(seats, seeding, rng)

    slots = [
        _opening_slot(seats[i], seats[i + 1], i // 2, total_rounds)
        for i in range(0, bracket_size, 2)
    ]
    for round_number in range(2, total_rounds + 1):
        for match_index in range(bracket_size >> round_number):
            slots.append(
                BracketSlot(
                    round=round_number,
                    match_number=match_index,
                    result_for_winner=winner_destination(
                        round_number, match_index, total_rounds
                    ),
                    result_for_loser=MatchResultType.EXIT,
                )
            )

    logger.debug(
        "Knockout bracket: %d players, %d seats, %d rounds, %d slots (%s seeding)",
        len(roster),
        bracket_size,
        total_rounds,
        len(slots),
        seeding.value,
    )
    return slots
