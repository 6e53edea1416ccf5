"""Standing rows and the scoring rules that produce them."""

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
from typing import Any, Dict

from tourneyplan.constants import (
    DEFAULT_POINTS_PER_DRAW,
    DEFAULT_POINTS_PER_LOSS,
    DEFAULT_POINTS_PER_WIN,
)
from tourneyplan.type_hints import PlayerId


@dataclass
class ScoringRules:
    """Points awarded per match outcome.

    Attributes:
        points_per_win: Points for a win
        points_per_loss: Points for a loss
        points_per_draw: Points for a draw
    """

    points_per_win: float = DEFAULT_POINTS_PER_WIN
    points_per_loss: float = DEFAULT_POINTS_PER_LOSS
    points_per_draw: float = DEFAULT_POINTS_PER_DRAW

    def to_dict(self) -> Dict[str, Any]:
        """Serialize rules to dictionary."""
        return {
            "pointsPerWin": self.points_per_win,
            "pointsPerLoss": self.points_per_loss,
            "pointsPerDraw": self.points_per_draw,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScoringRules":
        """Deserialize rules from dictionary, filling in the defaults."""
        return cls(
            points_per_win=data.get("pointsPerWin", DEFAULT_POINTS_PER_WIN),
            points_per_loss=data.get("pointsPerLoss", DEFAULT_POINTS_PER_LOSS),
            points_per_draw=data.get("pointsPerDraw", DEFAULT_POINTS_PER_DRAW),
        )


@dataclass
class Standing:
    """Aggregated record of one player within a stage or group."""

    player: PlayerId
    matches: int = 0
    wins: int = 0
    losses: int = 0
    draws: int = 0
    points: float = 0
    sets_won: int = 0
    sets_lost: int = 0
    games_won: int = 0
    games_lost: int = 0

    @property
    def set_difference(self) -> int:
        return self.sets_won - self.sets_lost

    @property
    def game_difference(self) -> int:
        return self.games_won - self.games_lost

    def to_dict(self) -> Dict[str, Any]:
        """Serialize standing to dictionary."""
        return {
            "player": self.player,
            "matches": self.matches,
            "wins": self.wins,
            "losses": self.losses,
            "draws": self.draws,
            "points": self.points,
            "setsWon": self.sets_won,
            "setsLost": self.sets_lost,
            "gamesWon": self.games_won,
            "gamesLost": self.games_lost,
        }
