"""
Shared pytest fixtures for cetkaik tests.
"""

from pathlib import Path
import sys

import pytest

# Ensure the repository root is on sys.path so `import cetkaik` works when
# running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from cetkaik.config import ALIAS_FILE_ENV, reset_notation_config  # noqa: E402


@pytest.fixture(autouse=True)
def clean_notation_config(monkeypatch):
    """Every test starts with no alias file and a fresh config cache."""
    monkeypatch.delenv(ALIAS_FILE_ENV, raising=False)
    reset_notation_config()
    yield
    reset_notation_config()


@pytest.fixture
def alias_file(tmp_path) -> Path:
    path = tmp_path / "aliases.yaml"
    path.write_text(
        "colors:\n"
        "  rouge: 赤\n"
        "  noir: black\n"
        "professions:\n"
        "  pion: 兵\n"
        "  tour: rook\n",
        encoding="utf-8",
    )
    return path
