from datetime import date, datetime

import pytest

from tourneyplan.exceptions import InvalidDateException, InvalidInputException
from tourneyplan.models.enums import SeedingType
from tourneyplan.pairing.knockout import generate_knockout_bracket
from tourneyplan.pairing.round_robin import generate_round_robin
from tourneyplan.tournament.scheduling import (
    parse_date,
    round_dates,
    schedule_rounds,
    stage_window,
)


def test_round_dates_weekly_by_default():
    assert round_dates(3, date(2025, 3, 1)) == {
        1: date(2025, 3, 1),
        2: date(2025, 3, 8),
        3: date(2025, 3, 15),
    }


def test_round_dates_cross_month_and_custom_interval():
    dates = round_dates(3, "2025-01-30", interval_days=2)
    assert dates == {1: date(2025, 1, 30), 2: date(2025, 2, 1), 3: date(2025, 2, 3)}


def test_zero_interval_puts_every_round_on_one_day():
    assert set(round_dates(4, "2025-06-01", 0).values()) == {date(2025, 6, 1)}


def test_no_rounds_no_dates():
    assert round_dates(0, "2025-06-01") == {}


@pytest.mark.parametrize(
    "value",
    [date(2025, 5, 4), datetime(2025, 5, 4, 18, 30), "2025-05-04", "2025-05-04T18:30:00", " 20250504 "],
)
def test_parse_date_accepts_dates_and_iso_strings(value):
    assert parse_date(value) == date(2025, 5, 4)


@pytest.mark.parametrize("value", ["tomorrow", "2025-13-01", ""])
def test_parse_date_rejects_garbage(value):
    with pytest.raises(InvalidDateException):
        parse_date(value)


def test_invalid_date_is_invalid_input():
    with pytest.raises(InvalidInputException):
        round_dates(2, "not a date")


def test_negative_interval_is_rejected():
    with pytest.raises(InvalidInputException):
        round_dates(2, "2025-01-01", interval_days=-1)


def test_schedule_round_robin_by_round():
    matches = generate_round_robin(["A", "B", "C", "D"])
    scheduled = schedule_rounds(matches, "2025-03-01")

    assert len(scheduled) == len(matches)
    for item in scheduled:
        expected = {1: date(2025, 3, 1), 2: date(2025, 3, 8), 3: date(2025, 3, 15)}
        assert item.scheduled_date == expected[item.match.round]
    assert scheduled[0].to_dict()["scheduledDate"] == "2025-03-01"
    assert scheduled[0].to_dict()["player1"] == "A"


def test_schedule_bracket_slots():
    slots = generate_knockout_bracket(list("abcde"), SeedingType.CUSTOM)
    scheduled = schedule_rounds(slots, date(2025, 9, 1), interval_days=1)

    final = [s for s in scheduled if s.match.round == 3]
    assert final[0].scheduled_date == date(2025, 9, 3)
    assert final[0].to_dict()["resultForWinner"] == "WINS_TOURNAMENT"


def test_stage_window():
    matches = generate_round_robin(["A", "B", "C"])
    assert stage_window(matches, "2025-03-01") == (date(2025, 3, 1), date(2025, 3, 15))


def test_stage_window_without_matches():
    assert stage_window([], "2025-03-01") == (date(2025, 3, 1), None)
