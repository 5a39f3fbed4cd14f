"""Backlog UI components - widgets making up the interactive session."""

from backlog.ui.components.backlog_list import BacklogList
from backlog.ui.components.edit_box import EditBox
from backlog.ui.components.help_bar import HelpBar

__all__ = ["BacklogList", "EditBox", "HelpBar"]
