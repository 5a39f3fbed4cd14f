"""
One-shot backlog commands.

Each function performs a single load-mutate-save cycle against a
``BacklogStore`` and returns what the CLI needs to print. Validation
failures are raised as ``CommandError`` subclasses; printing and exit
codes are the CLI's concern.
"""

from pathlib import Path
from typing import List, Optional, Sequence

from backlog.config import Config
from backlog.logging_config import get_logger
from backlog.models import BacklogItem
from backlog.services.backlog_store import BacklogStore
from backlog.services.global_index import GlobalIndexStore, register_repo
from backlog.services.repo_locator import backlog_path_for

logger = get_logger(__name__)

EMPTY_MESSAGE = "Backlog is empty. Use 'backlog add <description>' to add items."
ALL_DONE_MESSAGE = "All done! Backlog is clear."


class CommandError(Exception):
    """Base exception for one-shot command failures."""
    pass


class NotInRepositoryError(CommandError):
    """The current directory is not inside a git repository."""
    pass


class InvalidItemNumberError(CommandError):
    """Item number is zero or past the end of the backlog."""
    pass


class EmptyDescriptionError(CommandError):
    """No description given to ``add``."""
    pass


class SaveError(CommandError):
    """The backlog file could not be written."""
    pass


def format_item_line(number: int, item: BacklogItem) -> str:
    """Format one item as ``{number}. [x] {description}``."""
    return f"{number}. {item.checkbox} {item.description}"


def _resolve_index(items: Sequence[BacklogItem], number: int) -> int:
    if number < 1 or number > len(items):
        raise InvalidItemNumberError("Invalid item number")
    return number - 1


def _save(store: BacklogStore, items: Sequence[BacklogItem]) -> None:
    if not store.save(items):
        raise SaveError(f"Failed to save backlog: could not write {store.path}")


def summary_lines(items: Sequence[BacklogItem]) -> List[str]:
    """
    Lines for the default (no subcommand) view: pending items only.

    Pending items keep their actual numbers so they can be passed to
    ``done`` and ``remove`` directly.
    """
    if not items:
        return [EMPTY_MESSAGE]

    pending = [(i, item) for i, item in enumerate(items) if not item.done]
    if not pending:
        return [ALL_DONE_MESSAGE]

    lines = ["", f"{len(pending)} item(s) in backlog:"]
    lines.extend(format_item_line(i + 1, item) for i, item in pending)
    lines.append("")
    return lines


def add_item(
    store: BacklogStore,
    words: Sequence[str],
    repo_root: Optional[Path] = None,
    index_store: Optional[GlobalIndexStore] = None,
) -> BacklogItem:
    """
    Append a new item built from ``words`` and register the repository.

    Args:
        store: Backlog store for the current repository
        words: Description words, joined with single spaces
        repo_root: Repository root to record in the global index
        index_store: Global index store (defaults to the configured location)

    Returns:
        The newly created item

    Raises:
        EmptyDescriptionError: If the joined description is empty
        SaveError: If the backlog could not be written
    """
    description = " ".join(words)
    if not description:
        raise EmptyDescriptionError("Please provide a description")

    items = store.load()
    item = BacklogItem(description=description)
    items.append(item)
    _save(store, items)
    logger.info(f"Added item #{len(items)} to {store.path}")

    if repo_root is not None:
        register_repo(str(repo_root), index_store)

    return item


def list_lines(items: Sequence[BacklogItem]) -> List[str]:
    """Lines for ``backlog list``: every item with its checkbox."""
    if not items:
        return ["Backlog is empty."]

    lines = ["", "Backlog:", "--------"]
    lines.extend(format_item_line(i + 1, item) for i, item in enumerate(items))
    lines.append("")
    return lines


def list_all_lines(
    index_store: Optional[GlobalIndexStore] = None,
    config: Optional[Config] = None,
) -> List[str]:
    """
    Lines for ``backlog list --all``.

    Every registered repository with at least one pending item is shown with
    an underlined header and all of its items indented by two spaces.
    """
    index = (index_store or GlobalIndexStore()).load()
    if not index.repos:
        return ["No backlogs found."]

    config = config or Config()
    lines: List[str] = []
    for repo_path in index.repos:
        items = BacklogStore(backlog_path_for(Path(repo_path), config)).load()
        if all(item.done for item in items):
            continue

        lines.append("")
        lines.append(repo_path)
        lines.append("-" * len(repo_path))
        lines.extend(f"  {format_item_line(i + 1, item)}" for i, item in enumerate(items))
    lines.append("")
    return lines


def mark_done(store: BacklogStore, number: int) -> BacklogItem:
    """
    Mark the item with 1-based ``number`` as done.

    Raises:
        InvalidItemNumberError: If ``number`` is out of range
        SaveError: If the backlog could not be written
    """
    items = store.load()
    index = _resolve_index(items, number)
    items[index].done = True
    _save(store, items)
    logger.info(f"Marked item #{number} done in {store.path}")
    return items[index]


def remove_item(store: BacklogStore, number: int) -> BacklogItem:
    """
    Remove the item with 1-based ``number``.

    Raises:
        InvalidItemNumberError: If ``number`` is out of range
        SaveError: If the backlog could not be written
    """
    items = store.load()
    index = _resolve_index(items, number)
    removed = items.pop(index)
    _save(store, items)
    logger.info(f"Removed item #{number} from {store.path}")
    return removed


def next_item(items: Sequence[BacklogItem]) -> Optional[BacklogItem]:
    """First item that is not done, if any."""
    return next((item for item in items if not item.done), None)
