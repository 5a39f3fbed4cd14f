"""
Tests for BacklogStore JSON persistence.

Tests cover:
- Loading missing, empty, malformed and valid files
- Saving (directory creation, format, order)
- Save failures reported through the return value
"""

import json

import pytest

from backlog.models import BacklogItem
from backlog.services.backlog_store import BacklogStore


@pytest.fixture
def store(tmp_path):
    return BacklogStore(tmp_path / ".todo" / "backlog.json")


class TestLoad:
    """Tests for BacklogStore.load."""

    def test_missing_file_is_empty(self, store):
        """Test that a missing file loads as an empty backlog."""
        assert store.load() == []

    def test_malformed_json_is_empty(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{not json")

        assert store.load() == []

    def test_wrong_shape_is_empty(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text('{"items": "nope"}')

        assert store.load() == []

    def test_invalid_utf8_is_empty(self, store):
        """Test that bytes that are not UTF-8 load as an empty backlog."""
        store.path.parent.mkdir(parents=True)
        store.path.write_bytes(b'{"items": [], "x": "\xff\xfe"}')

        assert store.load() == []

    def test_unreadable_path_is_empty(self, store):
        """Test that a directory where the file should be loads as empty."""
        store.path.mkdir(parents=True)

        assert store.load() == []

    def test_loads_items_in_order(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text(json.dumps({
            "items": [
                {"description": "b", "created_at": "2025-01-14T10:00:00Z", "done": False},
                {"description": "a", "created_at": "2025-01-14T10:05:00Z", "done": True},
            ]
        }))

        items = store.load()

        assert [item.description for item in items] == ["b", "a"]
        assert [item.done for item in items] == [False, True]


class TestSave:
    """Tests for BacklogStore.save."""

    def test_creates_parent_directory(self, store, sample_items):
        """Test that .todo/ is created on first save."""
        assert store.save(sample_items) is True
        assert store.path.is_file()

    def test_writes_pretty_printed_json(self, store, sample_items):
        store.save(sample_items)

        text = store.path.read_text()
        data = json.loads(text)

        assert "\n  " in text
        assert [item["description"] for item in data["items"]] == ["write tests", "fix bug", "ship"]
        assert [item["done"] for item in data["items"]] == [False, True, False]

    def test_load_after_save_keeps_items(self, store, sample_items):
        store.save(sample_items)

        loaded = store.load()

        assert loaded == sample_items

    def test_save_empty_list(self, store, sample_items):
        store.save(sample_items)
        store.save([])

        assert store.load() == []
        assert json.loads(store.path.read_text()) == {"items": []}

    def test_unwritable_location_returns_false(self, tmp_path):
        """Test that a write failure is reported, not raised."""
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        store = BacklogStore(blocker / ".todo" / "backlog.json")

        assert store.save([BacklogItem(description="x")]) is False
