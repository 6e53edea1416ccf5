"""Stage, group and structure configuration data classes."""

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
from typing import Any, Dict, List, Optional, Union

from tourneyplan.constants import DEFAULT_ADVANCING_PER_GROUP, DEFAULT_GROUP_COUNT
from tourneyplan.models.bracket import BracketSlot
from tourneyplan.models.enums import SeedingType, StageType
from tourneyplan.models.match import MatchPairing
from tourneyplan.type_hints import PlayerId
from tourneyplan.utils.validation import parse_enum

StageMatch = Union[MatchPairing, BracketSlot]


@dataclass
class Group:
    """A named partition of entrants."""

    name: str
    players: List[PlayerId] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "players": list(self.players)}


@dataclass
class StructureConfig:
    """Format-specific options for composing a tournament structure.

    Attributes:
        group_count: Number of groups for GROUP_KNOCKOUT
        advancing_per_group: Players leaving each group for the knockout stage
        seeding: Bracket seeding; None picks the format default
    """

    group_count: int = DEFAULT_GROUP_COUNT
    advancing_per_group: int = DEFAULT_ADVANCING_PER_GROUP
    seeding: Optional[SeedingType] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "groupCount": self.group_count,
            "advancingPerGroup": self.advancing_per_group,
            "seedingType": self.seeding.value if self.seeding else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StructureConfig":
        """Deserialize configuration from dictionary."""
        seeding = data.get("seedingType")
        return cls(
            group_count=data.get("groupCount", DEFAULT_GROUP_COUNT),
            advancing_per_group=data.get(
                "advancingPerGroup", DEFAULT_ADVANCING_PER_GROUP
            ),
            seeding=parse_enum(SeedingType, seeding) if seeding is not None else None,
        )


@dataclass
class StageDescriptor:
    """One stage of a composed tournament structure.

    Ownership passes to the caller, which persists it.

    Attributes
    ----------
    type : StageType
        Kind of stage.
    order : int
        Position of the stage, strictly increasing within a structure.
    players : list
        Entrants of the stage; empty for an unresolved knockout stage.
    matches : list
        ``MatchPairing`` items for round-robin stages, ``BracketSlot`` items
        for knockout stages.
    name : str
        Display name.
    groups : list of Group, optional
        Group partition of a group stage.
    advancing_per_group : int, optional
        Players leaving each group of a group stage.
    seeding : SeedingType, optional
        Seeding used (or to be used) by a knockout stage.
    expected_players : int, optional
        Size of a knockout stage that is still waiting for its players.
    """

    type: StageType
    order: int
    players: List[PlayerId] = field(default_factory=list)
    matches: List[StageMatch] = field(default_factory=list)
    name: str = ""
    groups: Optional[List[Group]] = None
    advancing_per_group: Optional[int] = None
    seeding: Optional[SeedingType] = None
    expected_players: Optional[int] = None

    @property
    def is_resolved(self) -> bool:
        """Whether the stage already has its players and matches."""
        return bool(self.players)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize stage to dictionary, omitting unset optional fields."""
        data: Dict[str, Any] = {
            "type": self.type.value,
            "order": self.order,
            "name": self.name,
            "players": list(self.players),
            "matches": [m.to_dict() for m in self.matches],
        }
        if self.groups is not None:
            data["groups"] = [g.to_dict() for g in self.groups]
        if self.advancing_per_group is not None:
            data["advancingPerGroup"] = self.advancing_per_group
        if self.seeding is not None:
            data["seedingType"] = self.seeding.value
        if self.expected_players is not None:
            data["expectedPlayers"] = self.expected_players
        return data
