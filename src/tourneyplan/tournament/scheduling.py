"""Calendar scheduling of rounds.

Assigns a date to every round of a stage, one round per interval starting
on the stage start date.
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

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

from tourneyplan.constants import DEFAULT_ROUND_INTERVAL_DAYS
from tourneyplan.exceptions import InvalidDateException, InvalidInputException
from tourneyplan.models.stage import StageMatch
from tourneyplan.utils import setup_logger

logger = setup_logger(__name__)

DateLike = Union[date, datetime, str]


@dataclass
class ScheduledMatch:
    """A generated match together with the date of its round."""

    match: StageMatch
    scheduled_date: date

    def to_dict(self) -> Dict[str, Any]:
        data = self.match.to_dict()
        data["scheduledDate"] = self.scheduled_date.isoformat()
        return data


def parse_date(value: DateLike) -> date:
    """Convert a date, datetime or ISO-8601 string to a ``date``.

    Raises:
        InvalidDateException: If the value cannot be interpreted
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return isoparse(str(value).strip()).date()
    except (ValueError, OverflowError) as e:
        raise InvalidDateException(f"Invalid date {value!r}: {e}") from e


def round_dates(
    total_rounds: int,
    start: DateLike,
    interval_days: int = DEFAULT_ROUND_INTERVAL_DAYS,
) -> Dict[int, date]:
    """Map round numbers 1..total_rounds to their dates.

    Raises:
        InvalidDateException: If ``start`` cannot be parsed
        InvalidInputException: If ``interval_days`` is negative
    """
    if interval_days < 0:
        raise InvalidInputException(
            f"Round interval must not be negative, got {interval_days}"
        )
    first = parse_date(start)
    return {
        round_number: first + relativedelta(days=interval_days * (round_number - 1))
        for round_number in range(1, total_rounds + 1)
    }


def schedule_rounds(
    matches: Iterable[StageMatch],
    start: DateLike,
    interval_days: int = DEFAULT_ROUND_INTERVAL_DAYS,
) -> List[ScheduledMatch]:
    """Attach the date of its round to every match.

    Works for round robin pairings and bracket slots alike, since both carry
    a ``round`` number.
    """
    matches = list(matches)
    total_rounds = max((m.round for m in matches), default=0)
    dates = round_dates(total_rounds, start, interval_days)
    logger.debug(
        "Scheduled %d matches over %d rounds from %s", len(matches), total_rounds, dates.get(1)
    )
    return [ScheduledMatch(match=m, scheduled_date=dates[m.round]) for m in matches]


def stage_window(
    matches: Iterable[StageMatch],
    start: DateLike,
    interval_days: int = DEFAULT_ROUND_INTERVAL_DAYS,
) -> Tuple[date, Optional[date]]:
    """Start and end date of a stage; the end is None when there are no matches."""
    scheduled = schedule_rounds(matches, start, interval_days)
    if not scheduled:
        return parse_date(start), None
    days = [s.scheduled_date for s in scheduled]
    return min(days), max(days)
