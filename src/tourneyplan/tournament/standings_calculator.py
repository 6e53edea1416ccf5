"""Standings calculation for round robin and group stages.

This module folds completed matches into per-player records and ranks them.
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

from typing import Dict, Iterable, List, Optional, Tuple

from tourneyplan.models.match import MatchRecord
from tourneyplan.models.standing import ScoringRules, Standing
from tourneyplan.type_hints import PlayerId
from tourneyplan.utils import setup_logger
from tourneyplan.utils.validation import unique_players

logger = setup_logger(__name__)


def standing_sort_key(standing: Standing) -> Tuple[float, int, int, int]:
    """Key ranking standings best first.

    Order: points, wins, set difference, game difference, all descending.
    """
    return (
        -standing.points,
        -standing.wins,
        -standing.set_difference,
        -standing.game_difference,
    )


class StandingsCalculator:
    """Computes ranked standings from completed matches.

    This class is responsible for:
    - Creating one zeroed row per roster player
    - Awarding match outcomes according to the scoring rules
    - Tallying sets and games when set scores are recorded
    - Ranking rows with a stable, deterministic order

    Matches without a winner are unplayed and ignored. Matches naming a
    player outside the roster are skipped without touching any row.
    """

    def __init__(self, rules: Optional[ScoringRules] = None):
        self.rules = rules if rules is not None else ScoringRules()

    def compute(
        self, matches: Iterable[MatchRecord], roster: Iterable[PlayerId]
    ) -> List[Standing]:
        """Compute the sorted standings of ``roster``.

        Args:
            matches: Match records of the stage or group
            roster: Every player of the stage or group

        Returns:
            One standing per roster player, best first

        Raises:
            DuplicatePlayerException: If the roster repeats a player
        """
        players = unique_players(roster, context="standings roster")
        rows: Dict[PlayerId, Standing] = {p: Standing(player=p) for p in players}

        applied = 0
        for match in matches:
            if self._apply_match(match, rows):
                applied += 1

        logger.debug(
            "Standings: %d players, %d completed matches applied", len(rows), applied
        )
        # sorted() is stable, so full ties keep roster order
        return sorted(rows.values(), key=standing_sort_key)

    def _apply_match(self, match: MatchRecord, rows: Dict[PlayerId, Standing]) -> bool:
        """Fold one match into the rows. Returns False when it was skipped."""
        if not match.is_played:
            return False

        first = rows.get(match.player1)
        second = rows.get(match.player2)
        if first is None or second is None or first is second:
            logger.debug(
                "Skipping match %r vs %r: player not in roster",
                match.player1,
                match.player2,
            )
            return False

        first.matches += 1
        second.matches += 1

        if match.winner == match.player1:
            self._award(winner=first, loser=second)
        elif match.winner == match.player2:
            self._award(winner=second, loser=first)
        else:
            for row in (first, second):
                row.draws += 1
                row.points += self.rules.points_per_draw

        self._tally_sets(match, first, second)
        return True

    def _award(self, winner: Standing, loser: Standing) -> None:
        winner.wins += 1
        winner.points += self.rules.points_per_win
        loser.losses += 1
        loser.points += self.rules.points_per_loss

    def _tally_sets(self, match: MatchRecord, first: Standing, second: Standing) -> None:
        for match_set in match.sets:
            set_winner = match_set.set_winner
            if set_winner == 1:
                first.sets_won += 1
                second.sets_lost += 1
            elif set_winner == 2:
                second.sets_won += 1
                first.sets_lost += 1

            first.games_won += match_set.player1_score
            first.games_lost += match_set.player2_score
            second.games_won += match_set.player2_score
            second.games_lost += match_set.player1_score


def compute_standings(
    matches: Iterable[MatchRecord],
    roster: Iterable[PlayerId],
    rules: Optional[ScoringRules] = None,
) -> List[Standing]:
    """Compute sorted standings with the given (or default) scoring rules."""
    return StandingsCalculator(rules).compute(matches, roster)
