"""
Tie-breaks between two hands of the same category.

| category                                 | decided by                                  |
|------------------------------------------|---------------------------------------------|
| high card, straight, flush, (royal) s.f. | every rank, highest first                   |
| three/four of a kind, full house         | sorted position 2, the rank of the group    |
| two pairs                                | higher pair, lower pair, then the kicker    |
| pair                                     | pair rank, then the other three, high first |

Suits never break a tie. What an exact tie yields, and whether kicker scans
reach the lowest card, comes from the active ``Ruleset``.
"""

from __future__ import annotations

from collections.abc import Sequence

from .cards import Hand
from .categories import GROUPED, UNPAIRED, Category
from .rules import Ruleset, load_rules
from .types import Outcome


def _compare(a: int, b: int) -> Outcome | None:
    if a > b:
        return Outcome.PLAYER1
    if b > a:
        return Outcome.PLAYER2
    return None


def _scan_high_to_low(r1: Sequence[int], r2: Sequence[int], rules: Ruleset) -> Outcome | None:
    stop = 1 if rules.skip_lowest_kicker else 0
    for i in range(len(r1) - 1, stop - 1, -1):
        decided = _compare(r1[i], r2[i])
        if decided is not None:
            return decided
    return None


def two_pair_parts(r: Sequence[int]) -> tuple[int, int, int]:
    """(higher pair, lower pair, kicker) of a sorted two-pairs hand."""
    high, low = max(r[1], r[3]), min(r[1], r[3])
    kicker = next(v for v in r if v != high and v != low)
    return high, low, kicker


def pair_parts(r: Sequence[int]) -> tuple[int, list[int]]:
    """(pair rank, remaining three ranks ascending) of a sorted one-pair hand."""
    pair = next(a for a, b in zip(r, r[1:]) if a == b)
    return pair, [v for v in r if v != pair]


def _exact_tie(category: Category, rules: Ruleset) -> Outcome:
    if rules.exact_ties == "favor_player2" and category not in UNPAIRED:
        return Outcome.PLAYER2
    return Outcome.DRAW


def _decide(category: Category, r1: Sequence[int], r2: Sequence[int], rules: Ruleset) -> Outcome | None:
    if category in UNPAIRED:
        return _scan_high_to_low(r1, r2, rules)

    if category in GROUPED:
        return _compare(r1[2], r2[2])

    if category is Category.TWO_PAIRS:
        high1, low1, kick1 = two_pair_parts(r1)
        high2, low2, kick2 = two_pair_parts(r2)
        if high1 == high2 and low1 == low2:
            return _compare(kick1, kick2)
        return _compare(high1, high2) or _compare(low1, low2)

    # PAIR
    pair1, rest1 = pair_parts(r1)
    pair2, rest2 = pair_parts(r2)
    if pair1 == pair2:
        return _scan_high_to_low(rest1, rest2, rules)
    return _compare(pair1, pair2)


def resolve(
    category: Category, hand1: Hand, hand2: Hand, rules: Ruleset | None = None
) -> Outcome:
    """Winner between two hands already known to share ``category``."""

    rules = rules or load_rules()
    category = Category(category)
    decided = _decide(category, hand1.ranks, hand2.ranks, rules)
    if decided is None:
        return _exact_tie(category, rules)
    return decided


__all__ = ["resolve", "two_pair_parts", "pair_parts"]
