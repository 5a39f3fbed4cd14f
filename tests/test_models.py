"""
Tests for backlog Pydantic models.

Tests cover:
- Item creation, defaults and the checkbox glyph
- Backlog file (de)serialization
- Pending-item filtering
- Global index registration
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from backlog.models import Backlog, BacklogItem, GlobalIndex


class TestBacklogItem:
    """Tests for BacklogItem model."""

    def test_item_creation_minimal(self):
        """Test creating an item with only a description."""
        item = BacklogItem(description="write tests")

        assert item.description == "write tests"
        assert item.done is False
        assert isinstance(item.created_at, datetime)
        assert item.created_at.tzinfo is not None

    def test_description_is_required(self):
        """Test that a missing description is rejected."""
        with pytest.raises(ValidationError):
            BacklogItem()

    def test_empty_description_is_allowed(self):
        """Test that the model itself does not reject empty text."""
        assert BacklogItem(description="").description == ""

    def test_checkbox(self, make_item):
        """Test the checkbox glyph for both states."""
        assert make_item(done=False).checkbox == "[ ]"
        assert make_item(done=True).checkbox == "[x]"

    def test_done_is_mutable(self, make_item):
        item = make_item()
        item.done = True
        assert item.checkbox == "[x]"


class TestBacklog:
    """Tests for Backlog model (the on-disk file)."""

    def test_empty_backlog(self):
        assert Backlog().items == []

    def test_json_field_names(self, make_item):
        """Test the stored field names."""
        data = Backlog(items=[make_item("ship", done=True)]).model_dump(mode="json")

        assert set(data) == {"items"}
        assert set(data["items"][0]) == {"description", "created_at", "done"}
        assert data["items"][0]["created_at"].startswith("2025-01-14T10:00:00")

    def test_parses_stored_file(self):
        """Test reading a file written by another version of the tool."""
        content = """
        {
          "items": [
            {"description": "write tests", "created_at": "2025-01-14T10:00:00Z", "done": false},
            {"description": "fix bug", "created_at": "2025-01-14T11:30:00.123456+00:00", "done": true}
          ]
        }
        """
        backlog = Backlog.model_validate_json(content)

        assert [item.description for item in backlog.items] == ["write tests", "fix bug"]
        assert backlog.items[0].created_at == datetime(2025, 1, 14, 10, 0, tzinfo=timezone.utc)
        assert backlog.items[1].done is True

    def test_order_is_preserved(self, make_item):
        items = [make_item(name) for name in ("c", "a", "b")]
        restored = Backlog.model_validate_json(Backlog(items=items).model_dump_json())
        assert [item.description for item in restored.items] == ["c", "a", "b"]

    def test_item_without_description_is_rejected(self):
        with pytest.raises(ValidationError):
            Backlog.model_validate_json('{"items": [{"done": true}]}')


class TestGlobalIndex:
    """Tests for GlobalIndex model."""

    def test_register_new_repo(self):
        index = GlobalIndex()

        assert index.register("/src/app") is True
        assert index.repos == ["/src/app"]

    def test_register_is_idempotent(self):
        index = GlobalIndex(repos=["/src/app"])

        assert index.register("/src/app") is False
        assert index.repos == ["/src/app"]

    def test_registration_order_is_kept(self):
        index = GlobalIndex()
        for path in ("/b", "/a", "/c", "/a"):
            index.register(path)

        assert index.repos == ["/b", "/a", "/c"]
