import json

import pytest

from tourneyplan.cli import create_parser, main


def _run(capsys, argv):
    code = main(argv)
    out = capsys.readouterr().out
    return code, (json.loads(out) if out else None)


def test_league_output(capsys):
    code, data = _run(capsys, ["--format", "LEAGUE", "a", "b", "c", "d"])

    assert code == 0
    assert data["type"] == "LEAGUE"
    assert data["players"] == ["a", "b", "c", "d"]
    (stage,) = data["stages"]
    assert stage["type"] == "ROUND_ROBIN"
    assert len(stage["matches"]) == 6
    assert "startDate" not in stage


def test_knockout_with_seed_is_reproducible(capsys):
    argv = ["--format", "KNOCKOUT", "--seed", "11", "p1", "p2", "p3", "p4", "p5"]
    _, first = _run(capsys, argv)
    _, second = _run(capsys, argv)

    assert first == second
    assert len(first["stages"][0]["matches"]) == 7


def test_group_knockout_with_dates(capsys):
    code, data = _run(
        capsys,
        [
            "--format", "GROUP_KNOCKOUT",
            "--groups", "2",
            "--advancing", "1",
            "--start-date", "2025-03-01",
            "--interval-days", "3",
            "p1", "p2", "p3", "p4", "p5", "p6",
        ],
    )

    assert code == 0
    groups, knockout = data["stages"]
    assert groups["startDate"] == "2025-03-01"
    assert groups["endDate"] == "2025-03-07"
    assert all("scheduledDate" in m for m in groups["matches"])
    assert knockout["expectedPlayers"] == 2
    assert knockout["matches"] == []


def test_players_file(tmp_path, capsys):
    roster = tmp_path / "players.txt"
    roster.write_text("# seeds\nalice\n\nbob\ncarol\n", encoding="utf-8")

    code, data = _run(capsys, ["--format", "KNOCKOUT", "--seeding", "RANKING", "--players-file", str(roster)])

    assert code == 0
    assert data["players"] == ["alice", "bob", "carol"]
    opening = [m for m in data["stages"][0]["matches"] if m["round"] == 1]
    assert opening[0] == {
        "player1": "alice",
        "player2": None,
        "round": 1,
        "matchNumber": 0,
        "resultForWinner": "R2M0",
        "resultForLoser": "EXIT",
        "bye": True,
        "winner": None,
    }


def test_custom_format_has_no_stages(capsys):
    code, data = _run(capsys, ["--format", "CUSTOM"])
    assert code == 0
    assert data["stages"] == []


@pytest.mark.parametrize(
    "argv",
    [
        ["--format", "KNOCKOUT", "solo"],
        ["--format", "LEAGUE", "a", "a"],
        ["--format", "GROUP_KNOCKOUT", "--groups", "30", "a", "b"],
        ["--format", "LEAGUE", "--start-date", "someday", "a", "b"],
    ],
)
def test_invalid_input_exits_with_two(capsys, argv):
    code, data = _run(capsys, argv)
    assert code == 2
    assert data is None


def test_missing_players_file_exits_with_two(tmp_path, capsys):
    code, _ = _run(capsys, ["--players-file", str(tmp_path / "missing.txt")])
    assert code == 2


def test_parser_rejects_unknown_format():
    with pytest.raises(SystemExit):
        create_parser().parse_args(["--format", "SWISS"])
