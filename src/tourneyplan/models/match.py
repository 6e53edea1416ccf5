"""Match data classes: generated pairings and completed match records."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from tourneyplan.models.enums import MatchStatus
from tourneyplan.type_hints import PlayerId
from tourneyplan.utils.validation import parse_enum


@dataclass
class MatchPairing:
    """A single round-robin pairing.

    Attributes
    ----------
    player1 : PlayerId
        First player, never a bye.
    player2 : PlayerId
        Second player, never a bye.
    round : int
        Round number, starting at 1.
    group : str, optional
        Group label when generated for a group stage.
    """

    player1: PlayerId
    player2: PlayerId
    round: int
    group: Optional[str] = None

    @property
    def players(self) -> List[PlayerId]:
        return [self.player1, self.player2]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing to dictionary."""
        data = {
            "player1": self.player1,
            "player2": self.player2,
            "round": self.round,
        }
        if self.group is not None:
            data["group"] = self.group
        return data


@dataclass
class MatchSet:
    """Score of one set within a match."""

    player1_score: int
    player2_score: int
    tiebreak: bool = False

    @property
    def set_winner(self) -> Optional[int]:
        """Return 1 or 2 for the side that took the set, None if level."""
        if self.player1_score > self.player2_score:
            return 1
        if self.player2_score > self.player1_score:
            return 2
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player1Score": self.player1_score,
            "player2Score": self.player2_score,
            "tiebreak": self.tiebreak,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchSet":
        return cls(
            player1_score=data["player1Score"],
            player2_score=data["player2Score"],
            tiebreak=data.get("tiebreak", False),
        )


@dataclass
class MatchRecord:
    """A match as stored by the caller, possibly completed.

    Only matches with a ``winner`` count as played. A winner equal to
    neither participant records a draw.

    Attributes
    ----------
    player1 : PlayerId
        First participant.
    player2 : PlayerId
        Second participant.
    winner : PlayerId, optional
        Recorded winner, None while the match is unplayed.
    sets : list of MatchSet
        Set scores from player1's and player2's point of view.
    group : str, optional
        Group the match belongs to in a group stage.
    round : int, optional
        Round number.
    status : MatchStatus, optional
        Lifecycle status as tracked by the caller.
    """

    player1: PlayerId
    player2: PlayerId
    winner: Optional[PlayerId] = None
    sets: List[MatchSet] = field(default_factory=list)
    group: Optional[str] = None
    round: Optional[int] = None
    status: Optional[MatchStatus] = None

    @property
    def is_played(self) -> bool:
        return self.winner is not None

    @property
    def is_draw(self) -> bool:
        return self.is_played and self.winner not in (self.player1, self.player2)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match record to dictionary."""
        return {
            "player1": self.player1,
            "player2": self.player2,
            "winner": self.winner,
            "sets": [s.to_dict() for s in self.sets],
            "group": self.group,
            "round": self.round,
            "status": self.status.value if self.status else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchRecord":
        """Deserialize match record from dictionary."""
        status = data.get("status")
        return cls(
            player1=data["player1"],
            player2=data["player2"],
            winner=data.get("winner"),
            sets=[MatchSet.from_dict(s) for s in data.get("sets") or []],
            group=data.get("group"),
            round=data.get("round"),
            status=parse_enum(MatchStatus, status) if status is not None else None,
        )
