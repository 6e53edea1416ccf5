import logging

import pytest

from tourneyplan.exceptions import InvalidAdvancementException, UnknownEnumValueException
from tourneyplan.models.enums import SeedingType
from tourneyplan.models.standing import Standing
from tourneyplan.tournament.advancement import cross_group_pairs, select_advancing


def _table(*players):
    return [Standing(player=p) for p in players]


def test_cross_group_two_groups_regression_order():
    groups = {"A": _table("a1", "a2"), "B": _table("b1", "b2")}
    assert select_advancing(groups, 2, SeedingType.CROSS_GROUP) == ["a1", "b1", "b2", "a2"]


def test_cross_group_four_groups():
    groups = {
        "D": _table("d1", "d2"),
        "C": _table("c1", "c2"),
        "B": _table("b1", "b2"),
        "A": _table("a1", "a2"),
    }
    assert select_advancing(groups, 2, "CROSS_GROUP") == [
        "a1", "b1", "c1", "d1",
        "b2", "a2", "d2", "c2",
    ]


def test_cross_group_pairs_wrap_odd_group_to_first():
    assert cross_group_pairs(["A", "B", "C", "D"]) == [("A", "B"), ("C", "D")]
    assert cross_group_pairs(["A", "B", "C"]) == [("A", "B"), ("C", "A")]
    assert cross_group_pairs(["A"]) == [("A", "A")]


def test_cross_group_odd_count_warns_and_never_repeats_a_player(caplog):
    groups = {"A": _table("a1", "a2"), "B": _table("b1", "b2"), "C": _table("c1", "c2")}
    with caplog.at_level(logging.WARNING, logger="tourneyplan"):
        advancing = select_advancing(groups, 2, SeedingType.CROSS_GROUP)

    assert advancing == ["a1", "b1", "c1", "b2", "a2", "c2"]
    assert len(advancing) == len(set(advancing))
    assert any("Odd group count" in r.getMessage() for r in caplog.records)


def test_cross_group_single_group():
    groups = {"A": _table("a1", "a2", "a3")}
    assert select_advancing(groups, 2, SeedingType.CROSS_GROUP) == ["a1", "a2"]


def test_cross_group_short_group_is_skipped_at_missing_ranks():
    groups = {"A": _table("a1", "a2"), "B": _table("b1")}
    assert select_advancing(groups, 2, SeedingType.CROSS_GROUP) == ["a1", "b1", "a2"]


@pytest.mark.parametrize("seeding", [SeedingType.RANDOM, SeedingType.RANKING, SeedingType.CUSTOM])
def test_other_policies_take_top_of_each_group_in_name_order(seeding):
    groups = {"B": _table("b1", "b2", "b3"), "A": _table("a1", "a2", "a3")}
    assert select_advancing(groups, 2, seeding) == ["a1", "a2", "b1", "b2"]


def test_more_advancing_than_group_size_takes_whole_group():
    groups = {"A": _table("a1"), "B": _table("b1", "b2")}
    assert select_advancing(groups, 3, SeedingType.RANKING) == ["a1", "b1", "b2"]


def test_empty_input_selects_nobody():
    assert select_advancing({}, 2, SeedingType.CROSS_GROUP) == []
    assert select_advancing({"A": []}, 2, SeedingType.RANKING) == []


@pytest.mark.parametrize("count", [0, -1])
def test_advancing_count_must_be_positive(count):
    with pytest.raises(InvalidAdvancementException):
        select_advancing({"A": _table("a1")}, count, SeedingType.RANKING)


def test_unknown_seeding_is_rejected():
    with pytest.raises(UnknownEnumValueException):
        select_advancing({"A": _table("a1")}, 1, "ZIGZAG")
