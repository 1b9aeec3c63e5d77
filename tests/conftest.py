import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'textparser'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from textparser.core.delimiters import DelimiterSpec
from helpers.cache_utils import reset_textparser_caches


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch) -> None:
    """Fresh config caches and no developer TEXTPARSER_* overrides per test."""
    for key in list(os.environ):
        if key.startswith("TEXTPARSER_"):
            monkeypatch.delenv(key, raising=False)
    reset_textparser_caches()
    yield
    reset_textparser_caches()


@pytest.fixture
def star_paren() -> DelimiterSpec:
    """The conventional ``*(`` / ``)*`` marker pair."""
    return DelimiterSpec("*(", ")*")


@pytest.fixture
def isolated_project(tmp_path: Path, monkeypatch) -> Path:
    """Empty project root with a .textparser/config directory, used as cwd."""
    (tmp_path / ".textparser" / "config").mkdir(parents=True)
    monkeypatch.chdir(tmp_path)
    return tmp_path
