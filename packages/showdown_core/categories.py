"""Hand categories, weakest to strongest; the int value is the comparison key."""

from __future__ import annotations

from enum import IntEnum


class Category(IntEnum):
    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIRS = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    @property
    def label(self) -> str:
        return self.name.lower()

    def __str__(self) -> str:
        return self.label


# Shapes that break ties by scanning every rank, highest first
UNPAIRED = frozenset(
    {
        Category.HIGH_CARD,
        Category.STRAIGHT,
        Category.FLUSH,
        Category.STRAIGHT_FLUSH,
        Category.ROYAL_FLUSH,
    }
)

# Shapes decided by the rank of the three or four matching cards
GROUPED = frozenset({Category.THREE_OF_A_KIND, Category.FULL_HOUSE, Category.FOUR_OF_A_KIND})


__all__ = ["Category", "UNPAIRED", "GROUPED"]
