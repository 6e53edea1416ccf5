"""Knockout bracket data classes.

Bracket linkage is kept as a typed ``SlotRef`` inside the engine and only
turned into the ``"R{round}M{index}"`` wire form when a slot is serialized.
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

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

from tourneyplan.constants import SLOT_REF_FORMAT, SLOT_REF_PATTERN
from tourneyplan.exceptions import InvalidSlotReferenceException
from tourneyplan.models.enums import MatchResultType
from tourneyplan.type_hints import PlayerId

_SLOT_REF_RE = re.compile(SLOT_REF_PATTERN)


@dataclass(frozen=True, order=True)
class SlotRef:
    """Position of a match in a bracket.

    Attributes:
        round: Round number (1-indexed)
        match_index: Match number within the round (0-indexed)
    """

    round: int
    match_index: int

    def __str__(self) -> str:
        return SLOT_REF_FORMAT.format(round=self.round, index=self.match_index)

    @property
    def feeders(self) -> Tuple["SlotRef", "SlotRef"]:
        """The two previous-round slots whose winners meet here."""
        return (
            SlotRef(self.round - 1, self.match_index * 2),
            SlotRef(self.round - 1, self.match_index * 2 + 1),
        )

    @classmethod
    def parse(cls, text: Union[str, "SlotRef"]) -> "SlotRef":
        """Parse the ``"R{round}M{index}"`` wire form.

        Raises:
            InvalidSlotReferenceException: If the text is malformed
        """
        if isinstance(text, SlotRef):
            return text
        match = _SLOT_REF_RE.match(str(text).strip())
        if not match or int(match.group(1)) < 1:
            raise InvalidSlotReferenceException(f"Invalid slot reference: {text!r}")
        return cls(int(match.group(1)), int(match.group(2)))


Destination = Union[SlotRef, MatchResultType]


def _destination_to_wire(destination: Destination) -> str:
    if isinstance(destination, MatchResultType):
        return destination.value
    return str(destination)


def _destination_from_wire(value: str) -> Destination:
    try:
        return MatchResultType(value)
    except ValueError:
        return SlotRef.parse(value)


@dataclass
class BracketSlot:
    """One match of a knockout bracket.

    Attributes
    ----------
    round : int
        Round number, 1 for the opening round.
    match_number : int
        0-indexed, contiguous position within the round.
    result_for_winner : SlotRef or MatchResultType
        Slot the winner moves to, or ``WINS_TOURNAMENT`` for the final.
    result_for_loser : SlotRef or MatchResultType
        Always ``EXIT`` for single elimination.
    player1, player2 : PlayerId, optional
        Unset until known. A bye slot only has ``player1``.
    bye : bool
        True on an opening-round slot where one seat was a bye.
    winner : PlayerId, optional
        Filled once the match is decided.
    """

    round: int
    match_number: int
    result_for_winner: Destination
    result_for_loser: Destination = MatchResultType.EXIT
    player1: Optional[PlayerId] = None
    player2: Optional[PlayerId] = None
    bye: bool = False
    winner: Optional[PlayerId] = None

    @property
    def ref(self) -> SlotRef:
        return SlotRef(self.round, self.match_number)

    @property
    def next_ref(self) -> Optional[SlotRef]:
        if isinstance(self.result_for_winner, SlotRef):
            return self.result_for_winner
        return None

    @property
    def is_final(self) -> bool:
        return self.result_for_winner is MatchResultType.WINS_TOURNAMENT

    @property
    def players(self) -> List[PlayerId]:
        """Players currently seated in this slot."""
        return [p for p in (self.player1, self.player2) if p is not None]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize slot to dictionary."""
        return {
            "player1": self.player1,
            "player2": self.player2,
            "round": self.round,
            "matchNumber": self.match_number,
            "resultForWinner": _destination_to_wire(self.result_for_winner),
            "resultForLoser": _destination_to_wire(self.result_for_loser),
            "bye": self.bye,
            "winner": self.winner,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BracketSlot":
        """Deserialize slot from dictionary."""
        return cls(
            round=data["round"],
            match_number=data["matchNumber"],
            result_for_winner=_destination_from_wire(data["resultForWinner"]),
            result_for_loser=_destination_from_wire(
                data.get("resultForLoser", MatchResultType.EXIT.value)
            ),
            player1=data.get("player1"),
            player2=data.get("player2"),
            bye=data.get("bye", False),
            winner=data.get("winner"),
        )
