from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .errors import InvalidCard, MalformedHand

SUITS = ["S", "H", "D", "C"]  # spades, hearts, diamonds, clubs
RANKS = ["A", "K", "Q", "J", "T", "9", "8", "7", "6", "5", "4", "3", "2"]  # strongest first

RANK_ORDER: dict[str, int] = {rank: 14 - i for i, rank in enumerate(RANKS)}
SUIT_NAMES = {"S": "♠", "H": "♥", "D": "♦", "C": "♣"}

HAND_SIZE = 5


def make_deck() -> list[str]:
    return [rank + suit for rank in RANKS for suit in SUITS]


def _canon_card(token: str) -> str:
    c = token.strip()
    if len(c) == 3 and c[:2] == "10":
        c = "T" + c[-1]
    return c.upper()


def parse_card(card: str) -> tuple[str, str]:
    if not isinstance(card, str):
        raise InvalidCard(card, reason="card must be a string")
    c = _canon_card(card)
    if len(c) != 2:
        raise InvalidCard(card, reason="expected rank and suit")
    rank, suit = c[0], c[1]
    if rank not in RANK_ORDER or suit not in SUIT_NAMES:
        raise InvalidCard(card)
    return rank, suit


@dataclass(frozen=True)
class Card:
    rank: str
    suit: str

    def __post_init__(self):
        if self.rank not in RANK_ORDER:
            raise InvalidCard(f"{self.rank}{self.suit}", reason="unknown rank")
        if self.suit not in SUIT_NAMES:
            raise InvalidCard(f"{self.rank}{self.suit}", reason="unknown suit")

    @classmethod
    def from_str(cls, card: str) -> Card:
        """``"TH"`` -> Card("T", "H"); case-insensitive, ``10`` accepted for ``T``."""
        rank, suit = parse_card(card)
        return cls(rank, suit)

    @property
    def value(self) -> int:
        return RANK_ORDER[self.rank]

    def same_suit(self, other: Card) -> bool:
        return self.suit == other.suit

    def __str__(self) -> str:
        return self.rank + self.suit

    def to_display_str(self) -> str:
        return self.rank + SUIT_NAMES[self.suit]


@dataclass(frozen=True)
class Hand:
    """Five cards in the order they were dealt.

    ``ranks`` is the ascending sorted view the classifier and the tie-break
    resolver work on; ``suits`` keeps input order, only "all equal" is asked of it.
    """

    cards: tuple[Card, ...]

    def __post_init__(self):
        cards = tuple(self.cards)
        if len(cards) != HAND_SIZE:
            raise MalformedHand({"expected": HAND_SIZE, "got": len(cards)})
        for c in cards:
            if not isinstance(c, Card):
                raise MalformedHand({"not_a_card": c})
        object.__setattr__(self, "cards", cards)

    @classmethod
    def of(cls, tokens: Iterable[str | Card]) -> Hand:
        return cls(tuple(t if isinstance(t, Card) else Card.from_str(t) for t in tokens))

    @classmethod
    def from_str(cls, text: str) -> Hand:
        """``"5H 5C 6S 7D 9S"`` -> Hand."""
        return cls.of(text.split())

    @property
    def ranks(self) -> tuple[int, ...]:
        return tuple(sorted(c.value for c in self.cards))

    @property
    def suits(self) -> tuple[str, ...]:
        return tuple(c.suit for c in self.cards)

    def __iter__(self):
        return iter(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        return " ".join(str(c) for c in self.cards)


__all__ = [
    "SUITS",
    "RANKS",
    "RANK_ORDER",
    "SUIT_NAMES",
    "HAND_SIZE",
    "Card",
    "Hand",
    "make_deck",
    "parse_card",
]
