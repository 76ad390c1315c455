from __future__ import annotations

import logging

import pytest
from showdown_core.cards import Hand
from showdown_core.errors import InvalidCard, MalformedHand
from showdown_core.records import iter_rounds, parse_round, read_rounds


def test_parse_round_splits_first_five_to_player_one():
    h1, h2 = parse_round("5H 5C 6S 7D 9S 5C 5D 6H 7S 9C\n")
    assert h1 == Hand.from_str("5H 5C 6S 7D 9S")
    assert h2 == Hand.from_str("5C 5D 6H 7S 9C")


def test_parse_round_tolerates_crlf_and_extra_spaces():
    h1, h2 = parse_round("  2H 3H 4H 5H 6H   AS AD AC AH KS\r\n")
    assert str(h1) == "2H 3H 4H 5H 6H"
    assert str(h2) == "AS AD AC AH KS"


@pytest.mark.parametrize(
    "line",
    [
        "2H 3H 4H 5H 6H AS AD AC AH",
        "2H 3H 4H 5H 6H AS AD AC AH KS QS",
        "2H3H4H5H6H ASADACAHKS",
    ],
)
def test_parse_round_needs_ten_cards(line):
    with pytest.raises(MalformedHand):
        parse_round(line)


def test_iter_rounds_skips_blank_lines_and_reports_line_numbers():
    lines = ["2H 3H 4H 5H 6H AS AD AC AH KS\n", "\n", "2H 3H 4H 5H 6H AS AD AC AH ZZ\n"]
    it = iter_rounds(lines)
    assert len(next(it)) == 2
    with pytest.raises(InvalidCard) as ei:
        next(it)
    assert ei.value.line == 3


def test_iter_rounds_skip_invalid_logs_and_continues(caplog):
    caplog.set_level(logging.WARNING, logger="showdown_core.records")
    lines = [
        "2H 3H 4H 5H 6H AS AD AC AH\n",
        "2C 2D 3H 4S 5D 3C 3D 4H 5S 6D\n",
    ]
    rounds = list(iter_rounds(lines, skip_invalid=True))
    assert len(rounds) == 1
    assert any("line 1" in r.getMessage() for r in caplog.records)


def test_read_rounds_from_file(tmp_path):
    p = tmp_path / "poker-hands.txt"
    p.write_text(
        "5H 5C 6S 7D 9S 5C 5D 6H 7S 9C\n2H 3H 4H 5H 6H AS AD AC AH KS\n",
        encoding="utf-8",
    )
    rounds = list(read_rounds(p))
    assert [str(h1) for h1, _ in rounds] == ["5H 5C 6S 7D 9S", "2H 3H 4H 5H 6H"]
