"""
Pick the showdown engine.

- ``SHOWDOWN_EVAL=native`` (or unset): the in-house engine with the active ruleset
- ``SHOWDOWN_EVAL=pokerkit``: PokerKit; raises if it is not installed
"""

import os
from functools import lru_cache

from .interfaces import HandEvaluator
from .native import NativeEvaluator

ENGINES = ("native", "pokerkit")


def _new_pokerkit() -> HandEvaluator:
    from .pokerkit_adapter import PokerKitEvaluator

    return PokerKitEvaluator()


@lru_cache(maxsize=4)
def get_evaluator(engine: str | None = None) -> HandEvaluator:
    want = (engine or os.getenv("SHOWDOWN_EVAL") or "native").strip().lower()
    if want == "pokerkit":
        return _new_pokerkit()
    if want == "native":
        return NativeEvaluator()
    raise ValueError(f"unknown engine {want!r}; expected one of {ENGINES}")
