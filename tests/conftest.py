"""conftest.py - pytest auto-loaded configuration.

Adds the repository root and tests/ to sys.path so that:
  - `import dymoapi` / `import dymo_check` work without an install, and
  - `from helpers import ...` resolves the shared test helpers module.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
TESTS_DIR = Path(__file__).resolve().parent

for _p in (str(ROOT), str(TESTS_DIR)):
    if _p not in sys.path:
        sys.path.insert(0, _p)


@pytest.fixture(autouse=True)
def _clean_dymo_env(monkeypatch):
    for name in (
        "DYMO_ORGANIZATION",
        "DYMO_ROOT_API_KEY",
        "DYMO_API_KEY",
        "DYMO_LOCAL",
        "DYMO_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
