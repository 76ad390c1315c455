#!/usr/bin/env python3
"""
Cross-check the native showdown engine against PokerKit on random deals.

  python scripts/crosscheck_pokerkit.py --deals 20000 --seed 7

Each deal takes ten distinct cards from a shuffled deck. Deals where either
hand holds A-2-3-4-5 are skipped (PokerKit plays it as a straight, the native
rules do not). Exits 1 when any outcome differs.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path


def _ensure_path() -> None:
    pkg = Path(__file__).resolve().parent.parent / "packages"
    if str(pkg) not in sys.path:
        sys.path.insert(0, str(pkg))


_ensure_path()

from showdown_core.cards import Hand, make_deck  # noqa: E402
from showdown_core.hand_eval import classify  # noqa: E402
from showdown_core.providers.native import NativeEvaluator  # noqa: E402
from showdown_core.providers.pokerkit_adapter import PokerKitEvaluator  # noqa: E402
from showdown_core.rules import STANDARD  # noqa: E402

_LOG = logging.getLogger("crosscheck_pokerkit")

WHEEL = (2, 3, 4, 5, 14)


def has_wheel(hand: Hand) -> bool:
    return hand.ranks == WHEEL


def deal(rnd: random.Random) -> tuple[Hand, Hand]:
    cards = rnd.sample(make_deck(), 10)
    return Hand.of(cards[:5]), Hand.of(cards[5:])


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Compare native showdown outcomes with PokerKit")
    p.add_argument("--deals", type=int, default=10_000)
    p.add_argument("--seed", type=int, default=123)
    p.add_argument("--show", type=int, default=5, help="Mismatches to print")
    return p.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    rnd = random.Random(args.seed)
    native = NativeEvaluator(STANDARD)
    reference = PokerKitEvaluator()

    checked = skipped = 0
    mismatches = []
    for _ in range(args.deals):
        hand1, hand2 = deal(rnd)
        if has_wheel(hand1) or has_wheel(hand2):
            skipped += 1
            continue
        checked += 1
        got, want = native.compare(hand1, hand2), reference.compare(hand1, hand2)
        if got is not want:
            mismatches.append((hand1, hand2, got, want))

    print(f"deals={args.deals} checked={checked} skipped_wheel={skipped} mismatches={len(mismatches)}")
    for hand1, hand2, got, want in mismatches[: args.show]:
        cat1, cat2 = classify(hand1, STANDARD), classify(hand2, STANDARD)
        print(
            f"  {hand1} [{cat1.label}] vs {hand2} [{cat2.label}]:"
            f" native={got.value} pokerkit={want.value}"
        )
    if mismatches:
        _LOG.error("%d outcomes differ from PokerKit", len(mismatches))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
