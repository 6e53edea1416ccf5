"""Tourney Plan: tournament structure and scheduling engine.

Pure functions that build round robin schedules and knockout brackets,
compute standings, select advancing players and compose whole tournament
structures. Nothing here performs I/O or keeps state between calls.
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

from tourneyplan.models import (
    BracketSlot,
    Group,
    MatchPairing,
    MatchRecord,
    MatchResultType,
    MatchSet,
    ScoringRules,
    SeedingType,
    SlotRef,
    StageDescriptor,
    StageType,
    Standing,
    StructureConfig,
    TournamentType,
)
from tourneyplan.pairing import generate_knockout_bracket, generate_round_robin
from tourneyplan.tournament import (
    complete_group_stage,
    compose_structure,
    compute_standings,
    select_advancing,
)

__version__ = "1.0.0"

__all__ = [
    "BracketSlot",
    "Group",
    "MatchPairing",
    "MatchRecord",
    "MatchResultType",
    "MatchSet",
    "ScoringRules",
    "SeedingType",
    "SlotRef",
    "StageDescriptor",
    "StageType",
    "Standing",
    "StructureConfig",
    "TournamentType",
    "complete_group_stage",
    "compose_structure",
    "compute_standings",
    "generate_knockout_bracket",
    "generate_round_robin",
    "select_advancing",
]
