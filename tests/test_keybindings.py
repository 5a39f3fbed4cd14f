"""
Tests for the key binding tables and lookups.
"""

import pytest
from textual.binding import Binding

from backlog.ui.keybindings import (
    CONFIRM_DELETE_KEY_MAP,
    EDIT_KEY_MAP,
    NORMAL_KEY_MAP,
    build_key_map,
    get_normal_mode_bindings,
    lookup_action,
)


class TestBuildKeyMap:
    """Tests for expanding bindings into lookups."""

    def test_comma_separated_keys_are_split(self):
        key_map = build_key_map([Binding("j,down", "move_down", "Down")])
        assert key_map == {"j": "move_down", "down": "move_down"}

    def test_whitespace_around_keys_is_ignored(self):
        key_map = build_key_map([Binding("q, escape", "quit", "Quit")])
        assert key_map == {"q": "quit", "escape": "quit"}

    def test_every_normal_binding_is_reachable(self):
        actions = {binding.action for binding in get_normal_mode_bindings()}
        assert set(NORMAL_KEY_MAP.values()) == actions


class TestNormalModeKeys:
    """Tests for the Normal mode key table."""

    @pytest.mark.parametrize(
        "key,action",
        [
            ("j", "move_down"),
            ("down", "move_down"),
            ("k", "move_up"),
            ("up", "move_up"),
            ("J", "move_item_down"),
            ("shift+down", "move_item_down"),
            ("K", "move_item_up"),
            ("shift+up", "move_item_up"),
            ("x", "toggle_done"),
            ("e", "edit_item"),
            ("a", "add_item"),
            ("h", "toggle_hide_completed"),
            ("d", "delete_gesture"),
            ("delete", "confirm_delete"),
            ("backspace", "confirm_delete"),
            ("q", "quit"),
            ("escape", "quit"),
            ("enter", "select_item"),
        ],
    )
    def test_key_resolves_to_action(self, key, action):
        assert lookup_action(NORMAL_KEY_MAP, key) == action

    def test_unbound_key(self):
        assert lookup_action(NORMAL_KEY_MAP, "z") is None


class TestTextEntryKeys:
    """Tests for the Add/Edit and confirmation key tables."""

    def test_letters_are_not_bound_while_editing(self):
        for key in "qjkxdaeh":
            assert lookup_action(EDIT_KEY_MAP, key) is None

    def test_editing_keys(self):
        assert lookup_action(EDIT_KEY_MAP, "enter") == "commit_edit"
        assert lookup_action(EDIT_KEY_MAP, "escape") == "cancel_edit"
        assert lookup_action(EDIT_KEY_MAP, "backspace") == "delete_before_cursor"
        assert lookup_action(EDIT_KEY_MAP, "delete") == "delete_at_cursor"

    def test_confirm_keys(self):
        assert lookup_action(CONFIRM_DELETE_KEY_MAP, "y") == "confirm_delete_yes"
        assert lookup_action(CONFIRM_DELETE_KEY_MAP, "n") == "confirm_delete_no"
        assert lookup_action(CONFIRM_DELETE_KEY_MAP, "escape") == "confirm_delete_no"
        assert lookup_action(CONFIRM_DELETE_KEY_MAP, "enter") is None
