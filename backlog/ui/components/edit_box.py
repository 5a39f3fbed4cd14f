"""EditBox widget: the input line shown while adding or editing an item."""

from rich.text import Text
from textual.widgets import Static

from backlog.ui.session import BacklogSession, Mode
from backlog.ui.theme import ACCENT, CURSOR_STYLE


class EditBox(Static):
    """Shows the session's edit buffer with a block cursor.

    Hidden outside Add/Edit mode. The border title names the mode.
    """

    DEFAULT_CSS = f"""
    EditBox {{
        height: 5;
        width: 100%;
        border: solid {ACCENT};
        display: none;
    }}
    """

    def update_from(self, session: BacklogSession) -> None:
        """Sync visibility, title and content with the session."""
        self.display = session.is_editing
        if not session.is_editing:
            return
        self.border_title = "Add" if session.mode == Mode.ADD else "Edit"
        self.update(render_edit_buffer(session.edit_buffer, session.edit_cursor))


def render_edit_buffer(buffer: str, cursor: int) -> Text:
    """Render ``buffer`` with the character under ``cursor`` highlighted.

    At the end of the buffer the cursor is drawn as a highlighted space.
    """
    text = Text(buffer[:cursor])
    text.append(buffer[cursor:cursor + 1] or " ", style=CURSOR_STYLE)
    text.append(buffer[cursor + 1:])
    return text
