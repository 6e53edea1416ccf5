"""Validation utilities for Tourney Plan.

This module provides reusable input checks with consistent error handling.
Every check raises a subclass of ``InvalidInputException``.
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

from enum import Enum
from typing import Any, Iterable, List, Type, TypeVar

from tourneyplan.exceptions import (
    DuplicatePlayerException,
    InsufficientPlayersException,
    UnknownEnumValueException,
)
from tourneyplan.type_hints import PlayerId

E = TypeVar("E", bound=Enum)


# ========== Enumeration Values ==========


def parse_enum(enum_cls: Type[E], value: Any) -> E:
    """Coerce ``value`` to a member of ``enum_cls``.

    Accepts a member of the enumeration or its string value in any case.

    Args:
        enum_cls: The enumeration class
        value: Member or wire value to convert

    Returns:
        The matching enumeration member

    Raises:
        UnknownEnumValueException: If the value is not part of the enumeration

    Example:
        >>> parse_enum(SeedingType, "cross_group")
        <SeedingType.CROSS_GROUP: 'CROSS_GROUP'>
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.strip().upper())
        except ValueError:
            pass
    allowed = ", ".join(member.value for member in enum_cls)
    raise UnknownEnumValueException(
        f"Unknown {enum_cls.__name__} value {value!r} (expected one of: {allowed})"
    )


# ========== Player Lists ==========


def unique_players(players: Iterable[PlayerId], context: str = "players") -> List[PlayerId]:
    """Copy ``players`` into a list, rejecting repeated identifiers.

    Raises:
        DuplicatePlayerException: If an identifier appears more than once
    """
    seen = set()
    result = []
    for player in players:
        if player in seen:
            raise DuplicatePlayerException(
                f"Player {player!r} appears more than once in {context}"
            )
        seen.add(player)
        result.append(player)
    return result


def require_min_players(players: List[PlayerId], minimum: int, context: str) -> None:
    """Raise if ``players`` holds fewer than ``minimum`` entries.

    Raises:
        InsufficientPlayersException: If there are too few players
    """
    if len(players) < minimum:
        raise InsufficientPlayersException(
            f"{context} needs at least {minimum} players, got {len(players)}"
        )
