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

# --- Constants ---

# Default stage scoring rules
DEFAULT_POINTS_PER_WIN = 2
DEFAULT_POINTS_PER_LOSS = 0
DEFAULT_POINTS_PER_DRAW = 1

# Group-to-knockout defaults
DEFAULT_GROUP_COUNT = 2
DEFAULT_ADVANCING_PER_GROUP = 2
# Groups are named with single letters A..Z
GROUP_NAMES = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
MAX_GROUP_COUNT = len(GROUP_NAMES)

# Smallest field that needs pairing
MIN_PLAYERS = 2

# Bracket linkage wire format, e.g. "R2M3"
SLOT_REF_FORMAT = "R{round}M{index}"
SLOT_REF_PATTERN = r"^R(\d+)M(\d+)$"

# Default stage names used by the structure composer
STAGE_NAME_LEAGUE = "League"
STAGE_NAME_GROUPS = "Group Stage"
STAGE_NAME_KNOCKOUT = "Knockout Stage"

# Round scheduling
DEFAULT_ROUND_INTERVAL_DAYS = 7

# Logging
LOG_LEVEL_ENV_VAR = "TOURNEYPLAN_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
