"""HelpBar widget: one line of key hints for the current mode."""

from textual.widgets import Static

from backlog.ui.keybindings import CONFIRM_DELETE_HELP, EDIT_HELP, NORMAL_HELP
from backlog.ui.session import BacklogSession, Mode
from backlog.ui.theme import BORDER, COMMENT, RED


def help_text_for(mode: Mode) -> str:
    if mode == Mode.CONFIRM_DELETE:
        return CONFIRM_DELETE_HELP
    if mode in (Mode.ADD, Mode.EDIT):
        return EDIT_HELP
    return NORMAL_HELP


class HelpBar(Static):
    """Key hints; shown in red while a delete is awaiting confirmation."""

    DEFAULT_CSS = f"""
    HelpBar {{
        height: 3;
        width: 100%;
        border: solid {BORDER};
        color: {COMMENT};
    }}

    HelpBar.confirm {{
        color: {RED};
    }}
    """

    def update_from(self, session: BacklogSession) -> None:
        self.set_class(session.mode == Mode.CONFIRM_DELETE, "confirm")
        self.update(help_text_for(session.mode))
