from __future__ import annotations

import csv
import logging

import pytest

from tools import score_hands

HANDS = (
    "5H 5C 6S 7D 9S 5C 5D 6H 7S 9C\n"
    "2H 3H 4H 5H 6H AS AD AC AH KS\n"
    "TH JH QH KH AH TC JC QC KC AC\n"
    "2C 2D 3H 4S 5D 3C 3D 4H 5S 6D\n"
    "4H 4D 9C 9S KH 4C 4S 6H 6D AC\n"
    "\n"
)


@pytest.fixture
def hand_file(tmp_path):
    p = tmp_path / "poker-hands.txt"
    p.write_text(HANDS, encoding="utf-8")
    return p


def test_prints_tally_with_standard_rules(hand_file, capsys):
    rc = score_hands.main([str(hand_file)])
    assert rc == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Player 1: 2", "Player 2: 1", "Draws: 2"]


def test_legacy_profile(hand_file, capsys):
    rc = score_hands.main([str(hand_file), "--profile", "legacy"])
    assert rc == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Player 1: 2", "Player 2: 2", "Draws: 1"]


def test_no_draw_line_when_every_round_is_decided(tmp_path, capsys):
    p = tmp_path / "hands.txt"
    p.write_text("2H 3H 4H 5H 6H AS AD AC AH KS\n", encoding="utf-8")
    assert score_hands.main([str(p)]) == 0
    assert capsys.readouterr().out.splitlines() == ["Player 1: 1", "Player 2: 0"]


def test_malformed_line_aborts(tmp_path, capsys):
    p = tmp_path / "hands.txt"
    p.write_text("2H 3H 4H 5H 6H AS AD AC AH KS\n2H 3H 4H\n", encoding="utf-8")
    assert score_hands.main([str(p)]) == 2
    assert capsys.readouterr().out == ""


def test_skip_invalid_keeps_scoring(tmp_path, capsys):
    p = tmp_path / "hands.txt"
    p.write_text("2H 3H 4H 5H 6H AS AD AC AH KS\n2H 3H 4H\n", encoding="utf-8")
    assert score_hands.main([str(p), "--skip-invalid"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Player 1: 1", "Player 2: 0"]


def test_missing_file(tmp_path):
    assert score_hands.main([str(tmp_path / "absent.txt")]) == 1


def test_writes_reports(hand_file, tmp_path):
    out_dir = tmp_path / "reports"
    rc = score_hands.main([str(hand_file), "--out-dir", str(out_dir), "--tag", "t1"])
    assert rc == 0
    csv_path = out_dir / "showdown_t1.summary.csv"
    md_path = out_dir / "showdown_t1.summary.md"
    assert csv_path.exists() and md_path.exists()
    with csv_path.open(encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["engine"] == "native"
    assert rows[0]["profile"] == "standard"
    assert (rows[0]["player1"], rows[0]["player2"], rows[0]["draws"]) == ("2", "1", "2")
    assert rows[0]["rounds"] == "5"
    assert rows[0]["tiebreaks"] == "4"
    assert "wins(P1/P2/draw)**: 2/1/2" in md_path.read_text(encoding="utf-8")


def test_score_file_with_pokerkit_engine(hand_file):
    pytest.importorskip("pokerkit")
    from showdown_core.providers.selector import get_evaluator

    score, counters = score_hands.score_file(str(hand_file), get_evaluator("pokerkit"))
    assert (score.player1, score.player2, score.draws) == (2, 1, 2)
    assert counters.rounds == 5


def test_undecodable_file_exits_with_read_error(tmp_path, capsys, caplog):
    p = tmp_path / "hands.txt"
    p.write_bytes(b"2H 3H 4H 5H 6H AS AD AC AH KS\n\xff\xfe\n")
    caplog.set_level(logging.ERROR, logger="tools.score_hands")
    assert score_hands.main([str(p)]) == 1
    assert capsys.readouterr().out == ""
    assert any("cannot read" in r.getMessage() for r in caplog.records)


def test_legacy_profile_misses_middle_triple(tmp_path, capsys):
    p = tmp_path / "hands.txt"
    p.write_text("2C 7D 7H 7S 9C 3D 3H 8C 8S 4D\n", encoding="utf-8")
    assert score_hands.main([str(p)]) == 0
    assert capsys.readouterr().out.splitlines() == ["Player 1: 1", "Player 2: 0"]
    assert score_hands.main([str(p), "--profile", "legacy"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Player 1: 0", "Player 2: 1"]


def test_profile_with_pokerkit_engine_is_reported(hand_file, caplog):
    pytest.importorskip("pokerkit")
    caplog.set_level(logging.WARNING, logger="tools.score_hands")
    args = score_hands._parse_args([str(hand_file), "--engine", "pokerkit", "--profile", "legacy"])
    ev = score_hands._evaluator(args)
    assert ev.name == "pokerkit"
    assert any("--profile legacy ignored" in r.getMessage() for r in caplog.records)


def test_native_engine_does_not_warn_about_profile(hand_file, caplog):
    caplog.set_level(logging.WARNING, logger="tools.score_hands")
    args = score_hands._parse_args([str(hand_file), "--profile", "legacy"])
    assert score_hands._evaluator(args).rules.name == "legacy"
    assert not caplog.records
