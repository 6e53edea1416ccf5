"""Tournament structure and progression for Tourney Plan.

This package turns entrants into stages, ranks played groups, selects who
advances and moves winners through a bracket.
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

from tourneyplan.tournament.advancement import select_advancing
from tourneyplan.tournament.progression import (
    advance_byes,
    champion,
    find_slot,
    record_winner,
)
from tourneyplan.tournament.scheduling import (
    ScheduledMatch,
    round_dates,
    schedule_rounds,
    stage_window,
)
from tourneyplan.tournament.standings_calculator import (
    StandingsCalculator,
    compute_standings,
)
from tourneyplan.tournament.structure import (
    complete_group_stage,
    compose_structure,
    split_into_groups,
)

__all__ = [
    "ScheduledMatch",
    "StandingsCalculator",
    "advance_byes",
    "champion",
    "complete_group_stage",
    "compose_structure",
    "compute_standings",
    "find_slot",
    "record_winner",
    "round_dates",
    "schedule_rounds",
    "select_advancing",
    "split_into_groups",
    "stage_window",
]
