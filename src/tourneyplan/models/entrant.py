"""Bracket and schedule seats: a real player or a bye."""

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

from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from tourneyplan.type_hints import PlayerId


@dataclass(frozen=True)
class Competitor:
    """A seat occupied by a real player."""

    player_id: PlayerId


@dataclass(frozen=True)
class Bye:
    """A placeholder seat meaning "no match needed". All byes are equal."""


BYE = Bye()

Entrant = Union[Competitor, Bye]


def as_entrants(players: Iterable[PlayerId]) -> List[Entrant]:
    """Wrap player identifiers as competitor seats."""
    return [Competitor(player) for player in players]


def player_of(entrant: Entrant) -> Optional[PlayerId]:
    """Return the player behind a seat, or None for a bye."""
    if isinstance(entrant, Competitor):
        return entrant.player_id
    return None
