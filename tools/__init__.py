"""Command-line tools and report helpers for showdown scoring."""

__all__ = [
    "score_hands",
    "report_utils",
]
