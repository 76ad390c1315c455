"""
Score a file of two-player showdowns and print the final tally.

Usage examples:

  python -m tools.score_hands poker-hands.txt
  python -m tools.score_hands poker-hands.txt --profile legacy
  python -m tools.score_hands poker-hands.txt --engine pokerkit --out-dir reports --tag run1

Each line holds ten cards, the first five for player 1:

  5H 5C 6S 7D 9S 5C 5D 6H 7S 9C
"""

from __future__ import annotations

import argparse
import logging
import os

from showdown_core.errors import EvaluationError
from showdown_core.providers.interfaces import HandEvaluator
from showdown_core.providers.native import NativeEvaluator
from showdown_core.providers.selector import ENGINES, get_evaluator
from showdown_core.records import read_rounds
from showdown_core.rules import STANDARD, available_profiles, load_rules
from showdown_core.types import Score

from tools.report_utils import ShowdownCounters
from tools.report_utils import score_headers
from tools.report_utils import score_row
from tools.report_utils import timestamp_tag
from tools.report_utils import write_csv
from tools.report_utils import write_markdown_summary

_LOG = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Score two-player five-card showdowns")
    p.add_argument("path", help="Hand-record file, one round per line")
    p.add_argument("--profile", default=None, help=f"Rules profile ({', '.join(available_profiles())})")
    p.add_argument("--engine", choices=ENGINES, default="native")
    p.add_argument("--skip-invalid", action="store_true", help="Log and skip malformed lines")
    p.add_argument("--out-dir", default="", help="Directory to write CSV/Markdown reports")
    p.add_argument("--tag", default="", help="Optional tag for output filenames")
    p.add_argument("-v", "--verbose", action="store_true", help="Log every round")
    return p.parse_args(argv)


def _evaluator(args: argparse.Namespace) -> HandEvaluator:
    if args.engine == "native":
        return NativeEvaluator(load_rules(args.profile))
    if args.profile:
        _LOG.warning(
            "--profile %s ignored: engine %s applies standard ranking", args.profile, args.engine
        )
    return get_evaluator(args.engine)


def score_file(
    path: str, evaluator: HandEvaluator, *, skip_invalid: bool = False
) -> tuple[Score, ShowdownCounters]:
    score = Score()
    counters = ShowdownCounters(rules=getattr(evaluator, "rules", STANDARD))
    for hand1, hand2 in read_rounds(path, skip_invalid=skip_invalid):
        outcome = evaluator.compare(hand1, hand2)
        score = score.record(outcome)
        counters.observe(hand1, hand2, outcome)
    return score, counters


def _write_reports(args, evaluator: HandEvaluator, score: Score, counters: ShowdownCounters) -> None:
    tag = (args.tag or timestamp_tag()).replace("/", "-")
    base = os.path.join(args.out_dir, f"showdown_{tag}")
    rules_name = getattr(getattr(evaluator, "rules", None), "name", "-")
    headers = ["source", "engine", "profile"] + score_headers() + ShowdownCounters.headers()
    row = [args.path, evaluator.name, rules_name] + score_row(score) + counters.to_row()
    write_csv(base + ".summary.csv", headers, [row])
    top = counters.winning.most_common(1)
    write_markdown_summary(
        base + ".summary.md",
        "Showdown summary",
        [
            ("source", args.path),
            ("engine", evaluator.name),
            ("profile", rules_name),
            ("rounds", score.rounds),
            ("wins(P1/P2/draw)", f"{score.player1}/{score.player2}/{score.draws}"),
            ("tie-breaks", counters.tiebreaks),
            ("top winning category", top[0][0].label if top else "-"),
        ],
    )
    _LOG.info("reports written to %s.summary.{csv,md}", base)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    evaluator = _evaluator(args)
    try:
        score, counters = score_file(args.path, evaluator, skip_invalid=args.skip_invalid)
    except (OSError, UnicodeDecodeError) as e:
        _LOG.error("cannot read %s: %s", args.path, e)
        return 1
    except EvaluationError as e:
        _LOG.error("line %s: %s", e.line, e)
        return 2

    print(f"Player 1: {score.player1}")
    print(f"Player 2: {score.player2}")
    if score.draws:
        print(f"Draws: {score.draws}")
    _LOG.info(
        "%d rounds, %d tie-breaks (engine=%s)", score.rounds, counters.tiebreaks, evaluator.name
    )

    if args.out_dir:
        _write_reports(args, evaluator, score, counters)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
