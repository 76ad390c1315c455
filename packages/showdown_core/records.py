"""
Hand-record files: one round per line, ten two-character cards separated by
spaces, the first five dealt to player 1, e.g.::

    5H 5C 6S 7D 9S 5C 5D 6H 7S 9C

Blank lines are skipped.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator

from .cards import HAND_SIZE, Hand
from .errors import EvaluationError, MalformedHand

_LOG = logging.getLogger(__name__)


def parse_round(line: str) -> tuple[Hand, Hand]:
    tokens = line.split()
    if len(tokens) != 2 * HAND_SIZE:
        raise MalformedHand({"expected_cards": 2 * HAND_SIZE, "got": len(tokens)})
    return Hand.of(tokens[:HAND_SIZE]), Hand.of(tokens[HAND_SIZE:])


def iter_rounds(
    lines: Iterable[str], *, skip_invalid: bool = False
) -> Iterator[tuple[Hand, Hand]]:
    """Yield rounds; a bad line raises with ``exc.line`` set, or is logged and skipped."""
    for lineno, line in enumerate(lines, 1):
        if not line.strip():
            continue
        try:
            pair = parse_round(line)
        except EvaluationError as exc:
            exc.line = lineno
            if not skip_invalid:
                raise
            _LOG.warning("skipping line %d: %s", lineno, exc)
            continue
        yield pair


def read_rounds(
    path: str | os.PathLike[str], *, skip_invalid: bool = False
) -> Iterator[tuple[Hand, Hand]]:
    with open(path, encoding="utf-8") as f:
        yield from iter_rounds(f, skip_invalid=skip_invalid)


__all__ = ["parse_round", "iter_rounds", "read_rounds"]
