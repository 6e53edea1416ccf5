import pytest

from tourneyplan.exceptions import (
    InvalidSlotReferenceException,
    TourneyPlanException,
    UnknownEnumValueException,
)
from tourneyplan.models.bracket import BracketSlot, SlotRef
from tourneyplan.models.entrant import BYE, Competitor, as_entrants, player_of
from tourneyplan.models.enums import MatchResultType, MatchStatus, SeedingType
from tourneyplan.models.match import MatchRecord, MatchSet
from tourneyplan.models.standing import ScoringRules
from tourneyplan.utils.validation import parse_enum


def test_slot_ref_wire_form():
    assert str(SlotRef(2, 3)) == "R2M3"
    assert SlotRef.parse("R2M3") == SlotRef(2, 3)
    assert SlotRef.parse(SlotRef(1, 0)) == SlotRef(1, 0)


@pytest.mark.parametrize("text", ["R0M1", "M1", "R1M", "r1m1", "R1M-1", "R1M1x"])
def test_slot_ref_rejects_malformed(text):
    with pytest.raises(InvalidSlotReferenceException):
        SlotRef.parse(text)


def test_slot_ref_feeders_and_ordering():
    assert SlotRef(3, 1).feeders == (SlotRef(2, 2), SlotRef(2, 3))
    assert sorted([SlotRef(2, 0), SlotRef(1, 3), SlotRef(1, 0)]) == [
        SlotRef(1, 0),
        SlotRef(1, 3),
        SlotRef(2, 0),
    ]


def test_bracket_slot_from_dict():
    slot = BracketSlot.from_dict(
        {
            "player1": "a",
            "player2": None,
            "round": 1,
            "matchNumber": 3,
            "resultForWinner": "R2M1",
            "bye": True,
        }
    )
    assert slot.ref == SlotRef(1, 3)
    assert slot.next_ref == SlotRef(2, 1)
    assert slot.result_for_loser is MatchResultType.EXIT
    assert slot.players == ["a"]
    assert not slot.is_final
    assert slot.to_dict()["resultForWinner"] == "R2M1"


def test_final_slot_from_dict():
    slot = BracketSlot.from_dict(
        {"round": 3, "matchNumber": 0, "resultForWinner": "WINS_TOURNAMENT"}
    )
    assert slot.is_final
    assert slot.next_ref is None


def test_bracket_slot_bad_link_is_rejected():
    with pytest.raises(InvalidSlotReferenceException):
        BracketSlot.from_dict({"round": 1, "matchNumber": 0, "resultForWinner": "next"})


def test_entrants():
    entrants = as_entrants(["a", "b"])
    assert entrants == [Competitor("a"), Competitor("b")]
    assert player_of(entrants[0]) == "a"
    assert player_of(BYE) is None


def test_parse_enum_is_case_insensitive():
    assert parse_enum(SeedingType, " ranking ") is SeedingType.RANKING
    assert parse_enum(SeedingType, SeedingType.CUSTOM) is SeedingType.CUSTOM


@pytest.mark.parametrize("value", ["SNAKE", None, 3])
def test_parse_enum_unknown(value):
    with pytest.raises(UnknownEnumValueException):
        parse_enum(SeedingType, value)


def test_exceptions_share_a_root():
    assert issubclass(UnknownEnumValueException, TourneyPlanException)
    assert issubclass(InvalidSlotReferenceException, TourneyPlanException)


def test_match_set_winner():
    assert MatchSet(6, 4).set_winner == 1
    assert MatchSet(5, 7).set_winner == 2
    assert MatchSet(3, 3).set_winner is None


def test_match_record_round_trip_keeps_fields():
    record = MatchRecord(
        player1="a",
        player2="b",
        winner="a",
        sets=[MatchSet(7, 6, tiebreak=True)],
        group="A",
        round=2,
        status=MatchStatus.COMPLETED,
    )
    restored = MatchRecord.from_dict(record.to_dict())
    assert restored == record
    assert restored.is_played and not restored.is_draw


def test_scoring_rules_from_dict_defaults():
    assert ScoringRules.from_dict({}) == ScoringRules()
    assert ScoringRules.from_dict({"pointsPerWin": 3}).points_per_win == 3
