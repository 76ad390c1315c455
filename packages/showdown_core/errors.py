"""
Error types raised by the showdown engine.

- `EvaluationError` is the common base, carrying a short `error_type` code
- `InvalidCard` / `MalformedHand` are also `ValueError` so callers may catch either
"""

from __future__ import annotations

from typing import Any


class EvaluationError(Exception):
    """Base error for card parsing and hand evaluation."""

    # 1-based record line, set by the hand-record reader
    line: int | None = None

    def __init__(self, error_type: str, detail: Any = None, original: str | None = None):
        self.error_type = error_type
        self.detail = detail
        self.original = original
        super().__init__(f"{error_type}: {detail or original or 'evaluation failed'}")


class InvalidCard(EvaluationError, ValueError):
    """Rank or suit symbol outside the recognised sets."""

    def __init__(self, token: Any, reason: str = "unknown rank or suit"):
        self.token = token
        super().__init__("invalid_card", detail={"card": token, "reason": reason})


class MalformedHand(EvaluationError, ValueError):
    """Hand that is not exactly five cards."""

    def __init__(self, detail: Any = None):
        super().__init__("malformed_hand", detail=detail)


__all__ = ["EvaluationError", "InvalidCard", "MalformedHand"]
