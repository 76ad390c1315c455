"""Round evaluation and score accumulation."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import reduce

from .cards import Hand
from .hand_eval import classify
from .rules import Ruleset, load_rules
from .tiebreak import resolve
from .types import Outcome, Round, Score

_LOG = logging.getLogger(__name__)


def judge(hand1: Hand, hand2: Hand, rules: Ruleset | None = None) -> Round:
    rules = rules or load_rules()
    cat1 = classify(hand1, rules)
    cat2 = classify(hand2, rules)
    if cat1 > cat2:
        outcome = Outcome.PLAYER1
    elif cat2 > cat1:
        outcome = Outcome.PLAYER2
    else:
        outcome = resolve(cat1, hand1, hand2, rules)
    _LOG.debug("%s [%s] vs %s [%s] -> %s", hand1, cat1, hand2, cat2, outcome)
    return Round(hand1=hand1, hand2=hand2, category1=cat1, category2=cat2, outcome=outcome)


def evaluate_round(hand1: Hand, hand2: Hand, rules: Ruleset | None = None) -> Outcome:
    """Higher category wins outright; equal categories go to the tie-break."""

    return judge(hand1, hand2, rules).outcome


def tally(
    rounds: Iterable[tuple[Hand, Hand]],
    rules: Ruleset | None = None,
    start: Score | None = None,
) -> Score:
    """Fold every ``(hand1, hand2)`` pair, in order, into a ``Score``."""

    rules = rules or load_rules()
    return reduce(
        lambda score, pair: score.record(evaluate_round(pair[0], pair[1], rules)),
        rounds,
        start or Score(),
    )


__all__ = ["judge", "evaluate_round", "tally"]
