# tests/conftest.py
import sys
from pathlib import Path

import pytest

# repo root: one level above tests/
ROOT = Path(__file__).resolve().parents[1]
PACKAGES_DIR = ROOT / "packages"

# packages/ for showdown_core, the root for tools/
sys.path.insert(0, str(PACKAGES_DIR))
sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    from showdown_core.providers.selector import get_evaluator
    from showdown_core.rules import load_rules

    for var in ("SHOWDOWN_RULES_FILE", "SHOWDOWN_RULES_PROFILE", "SHOWDOWN_EVAL"):
        monkeypatch.delenv(var, raising=False)
    load_rules.cache_clear()
    get_evaluator.cache_clear()
    yield
    load_rules.cache_clear()
    get_evaluator.cache_clear()
