"""
Interface for anything that can settle a two-hand showdown.

- ``compare(hand1, hand2)`` returns an ``Outcome`` from player 1's seat
- ``name`` identifies the engine in logs and reports
"""

from typing import Protocol

from showdown_core.cards import Hand
from showdown_core.types import Outcome


class HandEvaluator(Protocol):
    name: str

    def compare(self, hand1: Hand, hand2: Hand) -> Outcome: ...
