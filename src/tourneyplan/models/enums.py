"""Closed enumerations shared by the engine and its callers."""

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


class TournamentType(Enum):
    """Overall tournament format."""

    LEAGUE = "LEAGUE"
    KNOCKOUT = "KNOCKOUT"
    GROUP_KNOCKOUT = "GROUP_KNOCKOUT"
    ROUND_ROBIN = "ROUND_ROBIN"
    CUSTOM = "CUSTOM"


class StageType(Enum):
    """Kind of a single tournament stage."""

    GROUP = "GROUP"
    ROUND_ROBIN = "ROUND_ROBIN"
    KNOCKOUT = "KNOCKOUT"
    SEMIFINALS = "SEMIFINALS"
    FINALS = "FINALS"
    CUSTOM = "CUSTOM"


class SeedingType(Enum):
    """Rule deciding the bracket placement order."""

    RANDOM = "RANDOM"
    RANKING = "RANKING"
    CROSS_GROUP = "CROSS_GROUP"
    CUSTOM = "CUSTOM"


class MatchStatus(Enum):
    SCHEDULED = "SCHEDULED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class MatchResultType(Enum):
    """Terminal markers for where a bracket match sends its players."""

    EXIT = "EXIT"
    WINS_TOURNAMENT = "WINS_TOURNAMENT"
