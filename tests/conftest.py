"""
Pytest configuration and fixtures for backlog tests.

Provides item factories, a recording save callback, and an isolated
home directory / git repository for filesystem-backed tests.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import List

import pytest

from backlog.models import BacklogItem


@pytest.fixture(autouse=True)
def clean_backlog_env(monkeypatch):
    """Keep BACKLOG_* variables from the developer's shell out of tests."""
    for name in (
        "BACKLOG_TODO_DIR",
        "BACKLOG_FILE_NAME",
        "BACKLOG_GLOBAL_DIR",
        "BACKLOG_HIDE_COMPLETED",
        "BACKLOG_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_item():
    """
    Factory fixture for creating BacklogItem models.

    Example:
        def test_something(make_item):
            item = make_item("ship", done=True)
    """
    def _make_item(
        description: str = "Test item",
        done: bool = False,
        created_at: datetime = None,
    ) -> BacklogItem:
        return BacklogItem(
            description=description,
            done=done,
            created_at=created_at or datetime(2025, 1, 14, 10, 0, tzinfo=timezone.utc),
        )
    return _make_item


@pytest.fixture
def sample_items(make_item) -> List[BacklogItem]:
    """The three-item backlog used throughout the scenarios."""
    return [
        make_item("write tests"),
        make_item("fix bug", done=True),
        make_item("ship"),
    ]


class RecordingSaver:
    """Save callback that snapshots every call and can be told to fail."""

    def __init__(self, succeed: bool = True):
        self.succeed = succeed
        self.calls: List[List[BacklogItem]] = []

    def __call__(self, items: List[BacklogItem]) -> bool:
        self.calls.append([item.model_copy() for item in items])
        return self.succeed

    @property
    def last(self) -> List[BacklogItem]:
        return self.calls[-1]


@pytest.fixture
def saver() -> RecordingSaver:
    return RecordingSaver()


@pytest.fixture
def failing_saver() -> RecordingSaver:
    return RecordingSaver(succeed=False)


@pytest.fixture
def home_dir(tmp_path, monkeypatch) -> Path:
    """Point the home directory at a temporary location."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def git_repo(tmp_path, home_dir, monkeypatch) -> Path:
    """A temporary git repository (just a .git directory) as the cwd."""
    repo = tmp_path / "repo"
    (repo / ".git").mkdir(parents=True)
    monkeypatch.chdir(repo)
    return repo
