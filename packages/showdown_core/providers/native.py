"""
The in-house engine: ordered category checks plus category-specific tie-breaks.
"""

from showdown_core.cards import Hand
from showdown_core.rounds import evaluate_round
from showdown_core.rules import Ruleset, load_rules
from showdown_core.types import Outcome

from .interfaces import HandEvaluator


class NativeEvaluator(HandEvaluator):
    name = "native"

    def __init__(self, rules: Ruleset | None = None):
        self.rules = rules or load_rules()

    def compare(self, hand1: Hand, hand2: Hand) -> Outcome:
        return evaluate_round(hand1, hand2, self.rules)
