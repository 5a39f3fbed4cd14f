"""Session state machine for the interactive backlog.

This module holds everything the interactive mode knows that is not tied to
a terminal:
- Cursor state (selection, scroll offset, edit buffer, pending delete)
- Selection and scroll control over the visible (filtered) items
- The modal key interpreter (Normal / Add / Edit / ConfirmDelete)

The session borrows the caller's item list for its whole lifetime and hands
the full list to the save callback after every mutation. A failed save is
logged and the in-memory list stays authoritative.
"""

from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from backlog.logging_config import get_logger
from backlog.models import BacklogItem
from backlog.ui.keybindings import (
    CONFIRM_DELETE_KEY_MAP,
    EDIT_KEY_MAP,
    NORMAL_KEY_MAP,
    lookup_action,
)
from backlog.ui.visibility import (
    actual_to_visible,
    clamp_selection,
    visible_indices,
    visible_to_actual,
)

logger = get_logger(__name__)

SaveCallback = Callable[[List[BacklogItem]], bool]

LIST_TITLE = "Backlog"
LIST_TITLE_HIDING = "Backlog (hiding completed)"


class Mode(str, Enum):
    """Input modes of the interactive session."""

    NORMAL = "normal"
    ADD = "add"
    EDIT = "edit"
    CONFIRM_DELETE = "confirm_delete"


class BacklogSession:
    """Modal controller for one interactive run over a list of items.

    Attributes:
        items: The borrowed item list; mutated in place
        selected: Visible position of the selected row
        scroll_offset: Visible position of the first row drawn
        mode: Current input mode
        edit_buffer: Text being composed in Add/Edit mode
        edit_cursor: Code-point offset of the cursor in ``edit_buffer``
        pending_delete: True after a first ``d`` press in Normal mode
        hide_completed: Whether done items are filtered out
        output: Description chosen with Enter, if any
        finished: True once the session should end
    """

    def __init__(
        self,
        items: List[BacklogItem],
        save: Optional[SaveCallback] = None,
        hide_completed: bool = False,
    ) -> None:
        """Initialize a session.

        Args:
            items: Items to browse and edit (mutated in place)
            save: Called with the full item list after every mutation
            hide_completed: Initial state of the hide-completed filter
        """
        self.items = items
        self._save = save
        self.selected = 0
        self.scroll_offset = 0
        self.mode = Mode.NORMAL
        self.edit_buffer = ""
        self.edit_cursor = 0
        self.pending_delete = False
        self.hide_completed = hide_completed
        self.output: Optional[str] = None
        self.finished = False

    # ==============================================================================
    # VIEW QUERIES
    # ==============================================================================

    def visible_indices(self) -> List[int]:
        return visible_indices(self.items, self.hide_completed)

    @property
    def visible_count(self) -> int:
        return len(self.visible_indices())

    def visible_rows(self) -> List[Tuple[int, BacklogItem]]:
        """Visible items paired with their actual indices, in store order."""
        return [(i, self.items[i]) for i in self.visible_indices()]

    def selected_actual(self) -> Optional[int]:
        """Actual index of the selected row, or None if nothing is visible."""
        return visible_to_actual(self.items, self.hide_completed, self.selected)

    def selected_item(self) -> Optional[BacklogItem]:
        actual = self.selected_actual()
        return self.items[actual] if actual is not None else None

    @property
    def title(self) -> str:
        return LIST_TITLE_HIDING if self.hide_completed else LIST_TITLE

    @property
    def is_editing(self) -> bool:
        return self.mode in (Mode.ADD, Mode.EDIT)

    # ==============================================================================
    # SELECTION & SCROLL
    # ==============================================================================

    def move_up(self) -> None:
        if self.selected > 0:
            self.selected -= 1

    def move_down(self) -> None:
        if self.selected < self.visible_count - 1:
            self.selected += 1

    def move_item_up(self) -> None:
        """Swap the selected item with its store-order predecessor."""
        actual = self.selected_actual()
        if actual is None or actual == 0:
            return
        self._swap_and_follow(actual, actual - 1)

    def move_item_down(self) -> None:
        """Swap the selected item with its store-order successor."""
        actual = self.selected_actual()
        if actual is None or actual >= len(self.items) - 1:
            return
        self._swap_and_follow(actual, actual + 1)

    def _swap_and_follow(self, actual: int, target: int) -> None:
        # Neighbours are taken in store order so hidden items are not skipped
        self.items[actual], self.items[target] = self.items[target], self.items[actual]
        new_position = actual_to_visible(self.items, self.hide_completed, target)
        if new_position is not None:
            self.selected = new_position
        logger.info(f"Moved item from position {actual + 1} to {target + 1}")
        self._persist()

    def toggle_hide_completed(self) -> None:
        """Flip the hide-completed filter.

        The selection position is kept (clamped), not the selected item.
        """
        self.hide_completed = not self.hide_completed
        self._reclamp()
        logger.debug(f"Hide completed: {self.hide_completed}, selected={self.selected}")

    def adjust_scroll(self, line_counts: Sequence[int], viewport_height: int) -> None:
        """Keep the selected row inside the viewport.

        Args:
            line_counts: Terminal lines used by each visible row (after wrapping)
            viewport_height: Lines available for rows
        """
        if self.selected < self.scroll_offset:
            self.scroll_offset = self.selected
            return
        if viewport_height <= 0:
            return
        last = min(self.selected, len(line_counts) - 1)
        while (
            self.scroll_offset < last
            and sum(line_counts[self.scroll_offset:last + 1]) > viewport_height
        ):
            self.scroll_offset += 1

    def _reclamp(self) -> None:
        self.selected = clamp_selection(self.selected, self.visible_count)

    # ==============================================================================
    # ITEM MUTATIONS
    # ==============================================================================

    def toggle_done(self) -> None:
        actual = self.selected_actual()
        if actual is None:
            return
        item = self.items[actual]
        item.done = not item.done
        logger.info(f"Item {actual + 1} marked {'done' if item.done else 'not done'}")
        self._persist()
        if self.hide_completed and item.done:
            self._reclamp()

    def delete_selected(self) -> None:
        """Remove the selected item and return to Normal mode."""
        actual = self.selected_actual()
        if actual is not None:
            removed = self.items.pop(actual)
            self._reclamp()
            logger.info(f"Deleted item {actual + 1}: {removed.description!r}")
            self._persist()
        self.mode = Mode.NORMAL

    def select_item(self) -> None:
        """Capture the selected description as output and finish."""
        item = self.selected_item()
        if item is not None:
            self.output = item.description
        self.finished = True

    def quit(self) -> None:
        self.finished = True

    def _persist(self) -> None:
        if self._save is None:
            return
        if not self._save(self.items):
            logger.warning("Save failed; continuing with in-memory backlog")

    # ==============================================================================
    # TEXT ENTRY (ADD / EDIT)
    # ==============================================================================

    def enter_add_mode(self) -> None:
        self.edit_buffer = ""
        self.edit_cursor = 0
        self.mode = Mode.ADD

    def enter_edit_mode(self) -> None:
        item = self.selected_item()
        if item is None:
            return
        self.edit_buffer = item.description
        self.edit_cursor = len(self.edit_buffer)
        self.mode = Mode.EDIT

    def commit_edit(self) -> None:
        """Apply the edit buffer: append in Add mode, overwrite in Edit mode."""
        if self.mode == Mode.ADD:
            if self.edit_buffer:
                self.items.append(BacklogItem(description=self.edit_buffer))
                # New items are never done, so they are always visible
                self.selected = self.visible_count - 1
                logger.info(f"Added item {len(self.items)}")
                self._persist()
        elif self.mode == Mode.EDIT:
            actual = self.selected_actual()
            if actual is not None:
                self.items[actual].description = self.edit_buffer
                logger.info(f"Edited item {actual + 1}")
                self._persist()
        self.mode = Mode.NORMAL

    def cancel_edit(self) -> None:
        self.mode = Mode.NORMAL

    def insert_char(self, character: str) -> None:
        self.edit_buffer = (
            self.edit_buffer[:self.edit_cursor] + character + self.edit_buffer[self.edit_cursor:]
        )
        self.edit_cursor += len(character)

    def delete_before_cursor(self) -> None:
        if self.edit_cursor > 0:
            self.edit_buffer = (
                self.edit_buffer[:self.edit_cursor - 1] + self.edit_buffer[self.edit_cursor:]
            )
            self.edit_cursor -= 1

    def delete_at_cursor(self) -> None:
        if self.edit_cursor < len(self.edit_buffer):
            self.edit_buffer = (
                self.edit_buffer[:self.edit_cursor] + self.edit_buffer[self.edit_cursor + 1:]
            )

    def cursor_left(self) -> None:
        if self.edit_cursor > 0:
            self.edit_cursor -= 1

    def cursor_right(self) -> None:
        if self.edit_cursor < len(self.edit_buffer):
            self.edit_cursor += 1

    # ==============================================================================
    # KEY DISPATCH
    # ==============================================================================

    def handle_key(self, key: str, character: Optional[str] = None) -> None:
        """Interpret one key press in the current mode.

        Args:
            key: Textual key name (e.g. "j", "shift+up", "enter")
            character: Printable character for the key, if any
        """
        logger.debug(f"Session key: key={key!r}, mode={self.mode.value}")
        if self.mode == Mode.NORMAL:
            self._handle_normal_key(key)
        elif self.mode == Mode.CONFIRM_DELETE:
            self._handle_confirm_delete_key(key)
        else:
            self._handle_edit_key(key, character)

    def _handle_normal_key(self, key: str) -> None:
        action = lookup_action(NORMAL_KEY_MAP, key)

        if action == "delete_gesture":
            if self.pending_delete:
                self.pending_delete = False
                self.delete_selected()
            else:
                self.pending_delete = True
            return

        self.pending_delete = False
        handler = {
            "quit": self.quit,
            "select_item": self.select_item,
            "move_down": self.move_down,
            "move_up": self.move_up,
            "move_item_down": self.move_item_down,
            "move_item_up": self.move_item_up,
            "toggle_done": self.toggle_done,
            "edit_item": self.enter_edit_mode,
            "add_item": self.enter_add_mode,
            "toggle_hide_completed": self.toggle_hide_completed,
            "confirm_delete": self._enter_confirm_delete,
        }.get(action)
        if handler is not None:
            handler()

    def _enter_confirm_delete(self) -> None:
        self.mode = Mode.CONFIRM_DELETE

    def _handle_confirm_delete_key(self, key: str) -> None:
        action = lookup_action(CONFIRM_DELETE_KEY_MAP, key)
        if action == "confirm_delete_yes":
            self.delete_selected()
        elif action == "confirm_delete_no":
            self.mode = Mode.NORMAL

    def _handle_edit_key(self, key: str, character: Optional[str]) -> None:
        handler = {
            "commit_edit": self.commit_edit,
            "cancel_edit": self.cancel_edit,
            "delete_before_cursor": self.delete_before_cursor,
            "delete_at_cursor": self.delete_at_cursor,
            "cursor_left": self.cursor_left,
            "cursor_right": self.cursor_right,
        }.get(lookup_action(EDIT_KEY_MAP, key))
        if handler is not None:
            handler()
        elif character and character.isprintable():
            self.insert_char(character)
