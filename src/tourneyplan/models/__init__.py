"""Data models for the tournament structure engine."""

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

from tourneyplan.models.bracket import BracketSlot, SlotRef
from tourneyplan.models.entrant import BYE, Bye, Competitor, Entrant
from tourneyplan.models.enums import (
    MatchResultType,
    MatchStatus,
    SeedingType,
    StageType,
    TournamentType,
)
from tourneyplan.models.match import MatchPairing, MatchRecord, MatchSet
from tourneyplan.models.stage import Group, StageDescriptor, StructureConfig
from tourneyplan.models.standing import ScoringRules, Standing

__all__ = [
    "BYE",
    "BracketSlot",
    "Bye",
    "Competitor",
    "Entrant",
    "Group",
    "MatchPairing",
    "MatchRecord",
    "MatchResultType",
    "MatchSet",
    "MatchStatus",
    "ScoringRules",
    "SeedingType",
    "SlotRef",
    "StageDescriptor",
    "StageType",
    "Standing",
    "StructureConfig",
    "TournamentType",
]
