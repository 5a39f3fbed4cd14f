"""Main Textual application for the interactive backlog.

This module drives the read-key / mutate / re-render cycle:
- List panel with wrapped, numbered items (BacklogList)
- Input box shown while adding or editing (EditBox)
- Key hints for the current mode (HelpBar)

Textual owns raw mode and the alternate screen and restores the terminal on
every exit path; ``run_interactive`` returns only after that has happened.
"""

from typing import List, Optional

from textual.app import App, ComposeResult
from textual.events import Key, Paste

from backlog.logging_config import get_logger
from backlog.models import BacklogItem
from backlog.ui.components import BacklogList, EditBox, HelpBar
from backlog.ui.session import BacklogSession, SaveCallback
from backlog.ui.theme import BACKGROUND, FOREGROUND

# Initialize logger for this module
logger = get_logger(__name__)

LIST_ID = "backlog-list"
EDIT_BOX_ID = "edit-box"
HELP_BAR_ID = "help-bar"


class SessionError(Exception):
    """The interactive session ended abnormally."""
    pass


class BacklogApp(App[Optional[str]]):
    """Full-screen interactive backlog session.

    The app's return value is the description chosen with Enter, or None.
    """

    CSS = f"""
    Screen {{
        background: {BACKGROUND};
        color: {FOREGROUND};
        layout: vertical;
    }}
    """

    ENABLE_COMMAND_PALETTE = False

    # ==============================================================================
    # LIFECYCLE METHODS
    # ==============================================================================

    def __init__(
        self,
        items: List[BacklogItem],
        save: Optional[SaveCallback] = None,
        hide_completed: bool = False,
        **kwargs
    ) -> None:
        """Initialize the backlog application.

        Args:
            items: Items to browse and edit (mutated in place)
            save: Called with the full item list after every mutation
            hide_completed: Initial state of the hide-completed filter
            **kwargs: Additional keyword arguments for App
        """
        super().__init__(**kwargs)
        self.title = "backlog"
        self.session = BacklogSession(items, save=save, hide_completed=hide_completed)

    def compose(self) -> ComposeResult:
        """Compose the application layout.

        Yields:
            Widgets that make up the application
        """
        yield BacklogList(self.session, id=LIST_ID)
        yield EditBox(id=EDIT_BOX_ID)
        yield HelpBar(id=HELP_BAR_ID)

    def on_mount(self) -> None:
        logger.info(f"Interactive session started with {len(self.session.items)} items")
        self._refresh_view()

    def on_unmount(self) -> None:
        logger.info("Interactive session shutting down")

    # ==============================================================================
    # EVENT HANDLERS
    # ==============================================================================

    def on_key(self, event: Key) -> None:
        """Feed every key press to the session state machine.

        Args:
            event: The key event
        """
        event.prevent_default()
        event.stop()

        self.session.handle_key(event.key, event.character)

        if self.session.finished:
            logger.info(f"Session finished, selection={'yes' if self.session.output else 'no'}")
            self.exit(self.session.output)
            return

        self._refresh_view()

    def on_paste(self, event: Paste) -> None:
        """Insert pasted text while adding or editing."""
        if not self.session.is_editing:
            return
        for character in event.text:
            if character.isprintable():
                self.session.insert_char(character)
        self._refresh_view()

    def _refresh_view(self) -> None:
        self.query_one(f"#{LIST_ID}", BacklogList).refresh_view()
        self.query_one(f"#{EDIT_BOX_ID}", EditBox).update_from(self.session)
        self.query_one(f"#{HELP_BAR_ID}", HelpBar).update_from(self.session)


def run_interactive(
    items: List[BacklogItem],
    save: Optional[SaveCallback] = None,
    hide_completed: bool = False,
) -> Optional[str]:
    """Run one interactive session over ``items``.

    Args:
        items: Items to browse and edit (mutated in place)
        save: Called with the full item list after every mutation
        hide_completed: Initial state of the hide-completed filter

    Returns:
        Description of the item chosen with Enter, or None if the session was
        quit or ``items`` is empty (in which case no session is started)

    Raises:
        SessionError: If the session loop failed; the terminal has already
            been restored when this is raised
    """
    if not items:
        logger.debug("No items, interactive session not started")
        return None

    app = BacklogApp(items, save=save, hide_completed=hide_completed)
    result = app.run()
    if app.return_code:
        logger.error(f"Interactive session failed with return code {app.return_code}")
        raise SessionError(f"interactive session failed (return code {app.return_code})")
    return result
