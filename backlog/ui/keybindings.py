"""Keyboard bindings for the interactive backlog session.

The session is modal, so keys are interpreted by the session state machine
rather than by Textual's binding dispatch. Bindings are still declared as
Textual ``Binding`` objects so that key names follow Textual's conventions
and each action has a human-readable description:
- Navigation (j/k, arrows) and reordering (J/K, shift+arrows)
- Item actions (x, e, a, h, dd, Delete/Backspace)
- Session control (q/Escape, Enter)
"""

from typing import Dict, List, Optional

from textual.binding import Binding

from backlog.logging_config import get_logger

logger = get_logger(__name__)


# Navigation keybindings
NAVIGATION_BINDINGS = [
    Binding("j,down", "move_down", "Navigate Down", show=False),
    Binding("k,up", "move_up", "Navigate Up", show=False),
]

# Reordering keybindings (move the item itself, not the selection)
REORDER_BINDINGS = [
    Binding("J,shift+j,shift+down", "move_item_down", "Move Item Down", show=False),
    Binding("K,shift+k,shift+up", "move_item_up", "Move Item Up", show=False),
]

# Item action keybindings
ITEM_ACTION_BINDINGS = [
    Binding("x", "toggle_done", "Toggle Done", show=True),
    Binding("e", "edit_item", "Edit", show=True),
    Binding("a", "add_item", "Add", show=True),
    Binding("h", "toggle_hide_completed", "Hide Done", show=True),
    Binding("d", "delete_gesture", "Delete (dd)", show=True),
    Binding("delete,backspace", "confirm_delete", "Delete...", show=False),
]

# Session control keybindings
SESSION_BINDINGS = [
    Binding("q,escape", "quit", "Quit", show=True),
    Binding("enter", "select_item", "Select", show=True),
]

# Text entry keys (Add/Edit modes); any other printable key is inserted
EDIT_BINDINGS = [
    Binding("enter", "commit_edit", "Confirm", show=True),
    Binding("escape", "cancel_edit", "Cancel", show=True),
    Binding("backspace", "delete_before_cursor", "Delete Left", show=False),
    Binding("delete", "delete_at_cursor", "Delete Right", show=False),
    Binding("left", "cursor_left", "Cursor Left", show=False),
    Binding("right", "cursor_right", "Cursor Right", show=False),
]

# Delete confirmation keys; everything else is ignored
CONFIRM_DELETE_BINDINGS = [
    Binding("y", "confirm_delete_yes", "Yes", show=True),
    Binding("n,escape", "confirm_delete_no", "No", show=True),
]

# Help bar texts per mode
NORMAL_HELP = "a:add  j/k:nav  x:toggle  e:edit  dd:del  K/J:move  h:hide done  q:quit"
EDIT_HELP = "Enter:confirm  Esc:cancel"
CONFIRM_DELETE_HELP = "Delete item? y:yes  n/Esc:cancel"


def get_normal_mode_bindings() -> List[Binding]:
    """Get all bindings interpreted in Normal mode.

    Returns:
        List of Binding objects
    """
    return (
        NAVIGATION_BINDINGS +
        REORDER_BINDINGS +
        ITEM_ACTION_BINDINGS +
        SESSION_BINDINGS
    )


def build_key_map(bindings: List[Binding]) -> Dict[str, str]:
    """Expand comma-separated binding keys into a key -> action lookup.

    Args:
        bindings: Bindings to expand

    Returns:
        Dictionary mapping each individual key name to its action name
    """
    key_map: Dict[str, str] = {}
    for binding in bindings:
        for key in binding.key.split(","):
            key_map[key.strip()] = binding.action
    return key_map


NORMAL_KEY_MAP = build_key_map(get_normal_mode_bindings())
EDIT_KEY_MAP = build_key_map(EDIT_BINDINGS)
CONFIRM_DELETE_KEY_MAP = build_key_map(CONFIRM_DELETE_BINDINGS)


def lookup_action(key_map: Dict[str, str], key: str) -> Optional[str]:
    """Resolve a Textual key name against a key map.

    Args:
        key_map: One of the per-mode key maps
        key: Textual key name (e.g. "j", "shift+down", "enter")

    Returns:
        Action name, or None if the key is not bound in this mode
    """
    action = key_map.get(key)
    logger.debug(f"Keybindings: key={key!r} -> action={action}")
    return action
