"""Tie-break rulesets loaded from ``config/rules.yaml``.

- ``SHOWDOWN_RULES_FILE`` points at an external YAML file (used when it exists)
- ``SHOWDOWN_RULES_PROFILE`` picks a profile, otherwise ``default_profile``
- A missing or unreadable file leaves the built-in ``standard`` ruleset
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml  # type: ignore

_LOG = logging.getLogger(__name__)

ExactTies = Literal["draw", "favor_player2"]
_EXACT_TIES = ("draw", "favor_player2")


@dataclass(frozen=True)
class Ruleset:
    name: str = "standard"
    exact_ties: ExactTies = "draw"
    skip_lowest_kicker: bool = False
    middle_triple: bool = True

    def __post_init__(self):
        if self.exact_ties not in _EXACT_TIES:
            raise ValueError(f"exact_ties must be one of {_EXACT_TIES}, got {self.exact_ties!r}")


STANDARD = Ruleset()


def _rules_path() -> Path:
    override = os.getenv("SHOWDOWN_RULES_FILE")
    if override:
        p = Path(override).expanduser().resolve()
        if p.exists():
            return p
        _LOG.warning("SHOWDOWN_RULES_FILE %s does not exist; using built-in rules", p)
    return Path(__file__).resolve().parent / "config" / "rules.yaml"


def _load_yaml(path: Path) -> Mapping[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        _LOG.warning("cannot parse rules file %s: %s", path, exc)
        return {}
    return data if isinstance(data, Mapping) else {}


def _as_bool(value: object) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _ruleset_from(name: str, cfg: Mapping[str, Any]) -> Ruleset:
    exact = str(cfg.get("exact_ties", STANDARD.exact_ties)).strip().lower()
    if exact not in _EXACT_TIES:
        _LOG.warning("profile %s: unknown exact_ties %r; using %r", name, exact, STANDARD.exact_ties)
        exact = STANDARD.exact_ties
    return Ruleset(
        name=name,
        exact_ties=exact,  # type: ignore[arg-type]
        skip_lowest_kicker=_as_bool(cfg.get("skip_lowest_kicker", STANDARD.skip_lowest_kicker)),
        middle_triple=_as_bool(cfg.get("middle_triple", STANDARD.middle_triple)),
    )


def available_profiles() -> list[str]:
    profiles = _load_yaml(_rules_path()).get("profiles", {})
    names = list(profiles) if isinstance(profiles, Mapping) else []
    if STANDARD.name not in names:
        names.insert(0, STANDARD.name)
    return names


@lru_cache(maxsize=8)
def load_rules(profile: str | None = None) -> Ruleset:
    """Return the named ruleset; ``None`` reads the env var, then ``default_profile``."""

    data = _load_yaml(_rules_path())
    want = (profile or os.getenv("SHOWDOWN_RULES_PROFILE") or "").strip().lower()
    if not want:
        want = str(data.get("default_profile") or STANDARD.name).strip().lower()

    profiles = data.get("profiles", {})
    cfg = profiles.get(want) if isinstance(profiles, Mapping) else None
    if isinstance(cfg, Mapping):
        return _ruleset_from(want, cfg)
    if want != STANDARD.name:
        _LOG.warning("unknown rules profile %r; using %r", want, STANDARD.name)
    return STANDARD


__all__ = ["Ruleset", "STANDARD", "load_rules", "available_profiles"]
