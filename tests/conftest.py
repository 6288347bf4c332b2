"""Ensure the ranxoshi package and the CLI script are importable for local pytest runs."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SCRIPTS = ROOT / "scripts"
for path in (ROOT, SCRIPTS):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from ranxoshi import Xoshiro256  # noqa: E402


@pytest.fixture
def gen() -> Xoshiro256:
    return Xoshiro256.from_seed(bytes(range(32)))
