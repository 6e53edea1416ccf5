from collections import Counter
from itertools import combinations

import pytest

from tourneyplan.exceptions import DuplicatePlayerException
from tourneyplan.pairing.round_robin import generate_round_robin


def _pairs(matches):
    return [frozenset((m.player1, m.player2)) for m in matches]


def test_four_players_three_rounds_of_two():
    matches = generate_round_robin(["A", "B", "C", "D"])

    assert len(matches) == 6
    assert sorted({m.round for m in matches}) == [1, 2, 3]
    assert Counter(m.round for m in matches) == {1: 2, 2: 2, 3: 2}
    assert set(_pairs(matches)) == {frozenset(p) for p in combinations("ABCD", 2)}


def test_first_round_pairs_opposite_ends_and_rotation_keeps_first_fixed():
    matches = generate_round_robin(["A", "B", "C", "D"])

    by_round = {}
    for m in matches:
        by_round.setdefault(m.round, []).append((m.player1, m.player2))

    assert by_round[1] == [("A", "D"), ("B", "C")]
    assert by_round[2] == [("A", "C"), ("D", "B")]
    assert by_round[3] == [("A", "B"), ("C", "D")]


@pytest.mark.parametrize("size", range(2, 13))
def test_every_pair_meets_exactly_once(size):
    players = [f"p{i}" for i in range(size)]
    matches = generate_round_robin(players)

    counts = Counter(_pairs(matches))
    assert len(matches) == size * (size - 1) // 2
    assert set(counts) == {frozenset(p) for p in combinations(players, 2)}
    assert set(counts.values()) == {1}
    assert all(m.player1 != m.player2 for m in matches)


@pytest.mark.parametrize("size", [3, 5, 7, 9])
def test_odd_field_idles_one_player_per_round(size):
    players = list(range(size))
    matches = generate_round_robin(players)

    rounds = sorted({m.round for m in matches})
    assert rounds == list(range(1, size + 1))

    idle = Counter()
    for round_number in rounds:
        in_round = [m for m in matches if m.round == round_number]
        assert len(in_round) == (size - 1) // 2
        busy = {p for m in in_round for p in m.players}
        assert len(busy) == size - 1
        idle.update(set(players) - busy)
    # every player sits out exactly once
    assert idle == Counter({p: 1 for p in players})


def test_no_player_plays_twice_in_a_round():
    matches = generate_round_robin(list("ABCDEFGH"))
    for round_number in {m.round for m in matches}:
        seen = [p for m in matches if m.round == round_number for p in m.players]
        assert len(seen) == len(set(seen))


def test_group_label_is_copied():
    matches = generate_round_robin(["x", "y", "z"], group="B")
    assert matches
    assert all(m.group == "B" for m in matches)
    assert matches[0].to_dict()["group"] == "B"


def test_no_group_label_is_omitted_from_dict():
    match = generate_round_robin(["x", "y"])[0]
    assert match.to_dict() == {"player1": "x", "player2": "y", "round": 1}


@pytest.mark.parametrize("players", [[], ["solo"]])
def test_degenerate_groups_yield_no_matches(players):
    assert generate_round_robin(players) == []


def test_duplicate_players_are_rejected():
    with pytest.raises(DuplicatePlayerException):
        generate_round_robin(["A", "B", "A"])


def test_input_list_is_not_mutated():
    players = ["A", "B", "C"]
    generate_round_robin(players)
    assert players == ["A", "B", "C"]
