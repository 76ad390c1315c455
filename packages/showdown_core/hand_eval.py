"""
Five-card category classification.

Checks run strongest first and the first match wins: the predicates are not
mutually exclusive on their own (a straight flush is also a flush, and the
three-of-a-kind test fires on four of a kind), so the order in
``_CHECKS`` is what makes every hand land in exactly one category.

All rank predicates take the ascending sorted rank values ``r[0..4]``.
"""

from __future__ import annotations

from collections.abc import Sequence

from .cards import Hand
from .categories import Category
from .rules import Ruleset, load_rules

ROYAL_RANKS = frozenset({10, 11, 12, 13, 14})


def all_same_suit(suits: Sequence[str]) -> bool:
    return all(s == suits[0] for s in suits)


def is_straight(r: Sequence[int]) -> bool:
    # Ace plays high only: A-2-3-4-5 is not a straight.
    return all(b - a == 1 for a, b in zip(r, r[1:]))


def is_royal_flush(r: Sequence[int], suits: Sequence[str]) -> bool:
    return all_same_suit(suits) and set(r) == ROYAL_RANKS


def is_straight_flush(r: Sequence[int], suits: Sequence[str]) -> bool:
    return all_same_suit(suits) and is_straight(r)


def is_four_of_a_kind(r: Sequence[int]) -> bool:
    return r[0] == r[3] or r[1] == r[4]


def is_full_house(r: Sequence[int]) -> bool:
    return r[0] == r[1] and r[3] == r[4] and (r[2] == r[0] or r[2] == r[4])


def is_three_of_a_kind(r: Sequence[int], middle: bool = True) -> bool:
    # the triple sits in sorted slots 0-2, 1-3 or 2-4; without ``middle`` the 1-3 slot is missed
    return r[0] == r[2] or (middle and r[1] == r[3]) or r[2] == r[4]


def is_two_pairs(r: Sequence[int]) -> bool:
    return (r[1] == r[0] or r[1] == r[2]) and (r[3] == r[2] or r[3] == r[4])


def is_pair(r: Sequence[int]) -> bool:
    return any(a == b for a, b in zip(r, r[1:]))


_CHECKS = (
    (Category.ROYAL_FLUSH, lambda r, s, m: is_royal_flush(r, s)),
    (Category.STRAIGHT_FLUSH, lambda r, s, m: is_straight_flush(r, s)),
    (Category.FOUR_OF_A_KIND, lambda r, s, m: is_four_of_a_kind(r)),
    (Category.FULL_HOUSE, lambda r, s, m: is_full_house(r)),
    (Category.FLUSH, lambda r, s, m: all_same_suit(s)),
    (Category.STRAIGHT, lambda r, s, m: is_straight(r)),
    (Category.THREE_OF_A_KIND, lambda r, s, m: is_three_of_a_kind(r, m)),
    (Category.TWO_PAIRS, lambda r, s, m: is_two_pairs(r)),
    (Category.PAIR, lambda r, s, m: is_pair(r)),
)


def classify_ranks(
    ranks: Sequence[int], suits: Sequence[str], *, middle_triple: bool = True
) -> Category:
    r = sorted(ranks)
    for category, check in _CHECKS:
        if check(r, suits, middle_triple):
            return category
    return Category.HIGH_CARD


def classify(hand: Hand, rules: Ruleset | None = None) -> Category:
    """Return the single category of ``hand``; card order does not matter."""

    rules = rules or load_rules()
    return classify_ranks(hand.ranks, hand.suits, middle_triple=rules.middle_triple)


__all__ = [
    "classify",
    "classify_ranks",
    "all_same_suit",
    "is_straight",
    "is_royal_flush",
    "is_straight_flush",
    "is_four_of_a_kind",
    "is_full_house",
    "is_three_of_a_kind",
    "is_two_pairs",
    "is_pair",
]
