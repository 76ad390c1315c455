from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from .cards import Hand
from .categories import Category


class Outcome(Enum):
    PLAYER1 = "player1"
    PLAYER2 = "player2"
    DRAW = "draw"

    def flipped(self) -> Outcome:
        """Same result seen with the seats swapped."""
        if self is Outcome.PLAYER1:
            return Outcome.PLAYER2
        if self is Outcome.PLAYER2:
            return Outcome.PLAYER1
        return self

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Round:
    hand1: Hand
    hand2: Hand
    category1: Category
    category2: Category
    outcome: Outcome


@dataclass(frozen=True)
class Score:
    player1: int = 0
    player2: int = 0
    draws: int = 0  # exact ties, nobody scores

    def record(self, outcome: Outcome) -> Score:
        if outcome is Outcome.PLAYER1:
            return replace(self, player1=self.player1 + 1)
        if outcome is Outcome.PLAYER2:
            return replace(self, player2=self.player2 + 1)
        return replace(self, draws=self.draws + 1)

    @property
    def rounds(self) -> int:
        return self.player1 + self.player2 + self.draws


__all__ = ["Outcome", "Round", "Score"]
