"""Tests for leaderboard ranking and score loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from success_ladder.exceptions import InvalidInputError
from success_ladder.game_elements.leaderboard import (
    build_leaderboard,
    load_member_scores,
    parse_member_score,
    summarize_leaderboard,
)
from success_ladder.models import MemberScore


@pytest.fixture
def members() -> list[MemberScore]:
    return [
        MemberScore("m1", "Ana", 120),
        MemberScore("m2", "Bruno", 640),
        MemberScore("m3", "Carla", 640),
        MemberScore("m4", "Davi", 16500),
        MemberScore("m5", "Eva", 0),
    ]


def test_build_leaderboard_orders_by_score(members):
    entries = build_leaderboard(members)
    assert [entry.member_id for entry in entries] == ["m4", "m2", "m3", "m1", "m5"]


def test_ties_share_rank(members):
    entries = build_leaderboard(members)
    assert [entry.rank for entry in entries] == [1, 2, 2, 4, 5]


def test_entries_carry_levels(members):
    entries = {entry.member_id: entry for entry in build_leaderboard(members)}
    assert entries["m4"].level.name == "Líder Sênior"
    assert entries["m2"].level.name == "Timóteo"
    assert entries["m1"].level.name == "Membro"
    assert entries["m5"].level.name == "Visitante"


def test_flags_current_user(members):
    entries = build_leaderboard(members, current_member_id="m1")
    flagged = [entry.member_id for entry in entries if entry.is_current_user]
    assert flagged == ["m1"]


def test_limit_truncates(members):
    entries = build_leaderboard(members, limit=2)
    assert [entry.member_id for entry in entries] == ["m4", "m2"]


def test_non_positive_limit_is_rejected(members):
    with pytest.raises(InvalidInputError):
        build_leaderboard(members, limit=0)


def test_summary_covers_all_members(members):
    stats = summarize_leaderboard(members, current_member_id="m3")
    assert stats.total_members == 5
    assert stats.top_score == 16500
    assert stats.average_score == pytest.approx(3580.0)
    assert stats.user_position == 2


def test_summary_of_empty_list():
    stats = summarize_leaderboard([])
    assert stats.total_members == 0
    assert stats.user_position is None


def test_summary_unknown_user_has_no_position(members):
    assert summarize_leaderboard(members, current_member_id="nobody").user_position is None


def test_parse_backend_record():
    member = parse_member_score(
        {
            "profile_id": "abc",
            "full_name": "Maria Souza",
            "success_ladder_score": 310,
            "avatar_url": "https://example.com/a.png",
        }
    )
    assert member == MemberScore("abc", "Maria Souza", 310, "https://example.com/a.png")


def test_parse_record_defaults_and_clamps():
    assert parse_member_score({"id": 7}).score == 0
    assert parse_member_score({"id": 7, "score": -40}).score == 0
    assert parse_member_score({"id": 7, "score": 12.8}).score == 12
    assert parse_member_score({"id": 7}).name == "7"


def test_parse_record_accepts_zero_id():
    member = parse_member_score({"id": 0, "score": 10})
    assert member.member_id == "0"
    assert member.name == "0"
    assert member.score == 10


def test_parse_record_empty_profile_id_falls_back_to_id():
    assert parse_member_score({"profile_id": "", "id": "m9"}).member_id == "m9"


@pytest.mark.parametrize(
    "record",
    [
        {"profile_id": "", "score": 10},
        {"id": None, "score": 10},
        {"full_name": "No Id", "success_ladder_score": 10},
        {"id": "x", "score": "ten"},
        ["not", "an", "object"],
    ],
)
def test_parse_record_rejects_bad_input(record):
    with pytest.raises(InvalidInputError):
        parse_member_score(record)


def _write(tmp_path: Path, payload) -> Path:
    path = tmp_path / "scores.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_bare_list(tmp_path):
    path = _write(tmp_path, [{"profile_id": "a", "success_ladder_score": 5}])
    assert load_member_scores(path) == [MemberScore("a", "a", 5)]


@pytest.mark.parametrize("key", ["leaderboard", "ranking", "members"])
def test_load_wrapped_list(tmp_path, key):
    path = _write(tmp_path, {key: [{"profile_id": "a", "full_name": "Ana", "success_ladder_score": 5}]})
    assert [member.name for member in load_member_scores(path)] == ["Ana"]


def test_load_rejects_wrong_shape(tmp_path):
    path = _write(tmp_path, {"total_members": 3})
    with pytest.raises(InvalidInputError) as excinfo:
        load_member_scores(path)
    assert excinfo.value.source == str(path)


def test_load_rejects_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(InvalidInputError):
        load_member_scores(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(InvalidInputError):
        load_member_scores(tmp_path / "missing.json")
