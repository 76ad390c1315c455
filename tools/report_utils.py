from __future__ import annotations

import csv
import os
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from showdown_core.cards import Hand
from showdown_core.categories import Category
from showdown_core.hand_eval import classify
from showdown_core.rules import STANDARD, Ruleset
from showdown_core.types import Outcome, Score


def _ensure_parent_dir(path: str) -> None:
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)


def timestamp_tag() -> str:
    return datetime.now().strftime("%Y%m%d-%H%M%S")


def win_share(wins: int, rounds: int) -> float:
    if rounds <= 0:
        return 0.0
    return wins / float(rounds)


def write_csv(path: str, headers: Iterable[str], rows: Iterable[Iterable[object]]) -> None:
    _ensure_parent_dir(path)
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(list(headers))
        for r in rows:
            w.writerow(list(r))


def write_markdown_summary(path: str, title: str, kv_pairs: Iterable[tuple[str, object]]) -> None:
    _ensure_parent_dir(path)
    lines: list[str] = [f"### {title}", ""]
    for k, v in kv_pairs:
        lines.append(f"- **{k}**: {v}")
    content = "\n".join(lines) + "\n"
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)


@dataclass
class ShowdownCounters:
    rounds: int = 0
    tiebreaks: int = 0  # both hands in the same category
    categories: Counter = field(default_factory=Counter)  # hands seen per category, both seats
    winning: Counter = field(default_factory=Counter)  # category of the winning hand
    rules: Ruleset = STANDARD  # classification rules of the engine being counted

    def observe(self, hand1: Hand, hand2: Hand, outcome: Outcome) -> None:
        self.rounds += 1
        cat1, cat2 = classify(hand1, self.rules), classify(hand2, self.rules)
        self.categories[cat1] += 1
        self.categories[cat2] += 1
        if cat1 == cat2:
            self.tiebreaks += 1
        if outcome is Outcome.PLAYER1:
            self.winning[cat1] += 1
        elif outcome is Outcome.PLAYER2:
            self.winning[cat2] += 1

    def to_row(self) -> list[object]:
        row: list[object] = [self.rounds, self.tiebreaks]
        for cat in Category:
            row.append(self.categories.get(cat, 0))
        return row

    @staticmethod
    def headers() -> list[str]:
        return ["rounds", "tiebreaks"] + [f"seen_{cat.label}" for cat in Category]


def score_headers() -> list[str]:
    return ["player1", "player2", "draws", "player1_share"]


def score_row(score: Score) -> list[object]:
    return [
        score.player1,
        score.player2,
        score.draws,
        round(win_share(score.player1, score.rounds), 4),
    ]
