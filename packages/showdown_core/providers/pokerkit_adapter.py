"""
PokerKit adapter

Ranks each five-card hand with PokerKit's ``StandardHighHand`` and turns the
comparison into an ``Outcome``. Used as an independent reference for the
native engine. PokerKit counts A-2-3-4-5 as a straight; the native rules do not.
"""

import functools

from showdown_core.cards import Hand
from showdown_core.errors import EvaluationError
from showdown_core.types import Outcome

from .interfaces import HandEvaluator


def _pk_card(card) -> str:
    return card.rank + card.suit.lower()  # PokerKit expects lower-case suits


def _canon5(hand: Hand) -> tuple[str, ...]:
    return tuple(sorted(_pk_card(c) for c in hand))  # cache key, order independent


class PokerKitEvaluator(HandEvaluator):
    name = "pokerkit"

    def __init__(self):
        # lazy import keeps pokerkit out of the native code path
        from pokerkit import StandardHighHand

        self._StandardHighHand = StandardHighHand

    @functools.lru_cache(maxsize=4096)
    def _rank_cached(self, canon: tuple[str, ...]):
        try:
            return self._StandardHighHand.from_game("".join(canon[:2]), "".join(canon[2:]))
        except Exception as e:
            raise EvaluationError("pokerkit_error", detail={"cards": canon}, original=str(e))

    def rank(self, hand: Hand):
        """PokerKit's comparable hand object for ``hand``."""
        return self._rank_cached(_canon5(hand))

    def compare(self, hand1: Hand, hand2: Hand) -> Outcome:
        h1, h2 = self.rank(hand1), self.rank(hand2)
        if h1 > h2:
            return Outcome.PLAYER1
        if h2 > h1:
            return Outcome.PLAYER2
        return Outcome.DRAW
