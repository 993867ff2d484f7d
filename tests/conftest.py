from __future__ import annotations

from pathlib import Path

import pytest

from bfast.readme.badges import build_badge_markdown
from tests._fixtures.repo_builder import RepoBuilder


@pytest.fixture
def repo_builder(tmp_path: Path) -> RepoBuilder:
    """Provide a reusable repo builder rooted at the pytest tmp_path."""
    return RepoBuilder(tmp_path)


@pytest.fixture
def badge() -> str:
    """The badge snippet for a sample project."""
    return build_badge_markdown("proj")


@pytest.fixture(autouse=True)
def _clear_api_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BFAST_API_BASE_URL", raising=False)
