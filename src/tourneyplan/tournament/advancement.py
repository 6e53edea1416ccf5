"""Selection of players advancing from a group stage to a knockout stage."""

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

from typing import List, Mapping, Sequence, Tuple, Union

from tourneyplan.exceptions import InvalidAdvancementException
from tourneyplan.models.enums import SeedingType
from tourneyplan.models.standing import Standing
from tourneyplan.type_hints import PlayerId, SeedingTypeValue
from tourneyplan.utils import setup_logger
from tourneyplan.utils.validation import parse_enum

logger = setup_logger(__name__)

GroupStandings = Mapping[str, Sequence[Standing]]


def cross_group_pairs(group_names: Sequence[str]) -> List[Tuple[str, str]]:
    """Pair sorted group names two at a time: (A, B), (C, D), ...

    With an odd count the last group is paired with the first one.
    """
    pairs = []
    for i in range(0, len(group_names), 2):
        if i + 1 < len(group_names):
            pairs.append((group_names[i], group_names[i + 1]))
        else:
            pairs.append((group_names[i], group_names[0]))
    return pairs


def _cross_group_order(
    standings_by_group: GroupStandings, group_names: List[str], advancing_per_group: int
) -> List[PlayerId]:
    pairs = cross_group_pairs(group_names)
    if len(group_names) % 2:
        logger.warning(
            "Odd group count (%d): group %s is paired with group %s for cross-group seeding",
            len(group_names),
            group_names[-1],
            group_names[0],
        )

    advancing: List[PlayerId] = []
    selected = set()
    for rank in range(advancing_per_group):
        for first, second in pairs:
            # Odd ranks run the pair in reverse: A1, B1 then B2, A2
            order = (first, second) if rank % 2 == 0 else (second, first)
            for name in order:
                table = standings_by_group[name]
                if rank >= len(table):
                    continue
                player = table[rank].player
                # The wraparound pair revisits the first group; a player is
                # emitted once only so the bracket never seats anyone twice
                if player in selected:
                    continue
                selected.add(player)
                advancing.append(player)
    return advancing


def select_advancing(
    standings_by_group: GroupStandings,
    advancing_per_group: int,
    seeding: Union[SeedingType, SeedingTypeValue],
) -> List[PlayerId]:
    """Select the players who leave the group stage, in bracket order.

    Groups are processed in lexicographic order of their names and each
    group's standings are expected to be sorted already.

    Args:
        standings_by_group: Sorted standings keyed by group name
        advancing_per_group: How many players leave each group
        seeding: Seeding policy of the next bracket

    Returns:
        Advancing player identifiers, ready for the knockout generator

    Raises:
        InvalidAdvancementException: If ``advancing_per_group`` is below 1
        UnknownEnumValueException: If the seeding policy is unknown
    """
    seeding = parse_enum(SeedingType, seeding)
    if advancing_per_group < 1:
        raise InvalidAdvancementException(
            f"Advancing players per group must be at least 1, got {advancing_per_group}"
        )

    group_names = sorted(standings_by_group)
    if not group_names:
        return []

    if seeding is SeedingType.CROSS_GROUP:
        advancing = _cross_group_order(
            standings_by_group, group_names, advancing_per_group
        )
    else:
        advancing = [
            standing.player
            for name in group_names
            for standing in standings_by_group[name][:advancing_per_group]
        ]

    logger.debug(
        "%d players advance from %d groups (%s seeding)",
        len(advancing),
        len(group_names),
        seeding.value,
    )
    return advancing
