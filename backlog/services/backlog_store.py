"""
JSON persistence for a repository's backlog.

The store never fails outward on load: a missing, unreadable or malformed
file is an empty backlog. Saving reports failure through its return value so
the interactive session can carry on with its in-memory state.
"""

from pathlib import Path
from typing import List, Sequence

from pydantic import ValidationError

from backlog.logging_config import get_logger
from backlog.models import Backlog, BacklogItem

logger = get_logger(__name__)


class BacklogStore:
    """
    Loads and saves the items of one backlog file.

    Usage:
        store = BacklogStore(path)
        items = store.load()
        items.append(BacklogItem(description="ship it"))
        store.save(items)
    """

    def __init__(self, path: Path):
        """
        Initialize the store.

        Args:
            path: Location of the backlog JSON file
        """
        self.path = path

    def load(self) -> List[BacklogItem]:
        """
        Read all items from disk.

        Returns:
            Items in stored order; empty when the file is missing or invalid
        """
        if not self.path.exists():
            logger.debug(f"No backlog file at {self.path}")
            return []

        try:
            content = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read backlog file {self.path}: {e}")
            return []

        try:
            backlog = Backlog.model_validate_json(content)
        except ValidationError as e:
            logger.warning(f"Malformed backlog file {self.path}, treating as empty: {e}")
            return []

        logger.debug(f"Loaded {len(backlog.items)} items from {self.path}")
        return backlog.items

    def save(self, items: Sequence[BacklogItem]) -> bool:
        """
        Write all items to disk, creating the parent directory if needed.

        Args:
            items: Items in the order they should be stored

        Returns:
            True on success, False if the file could not be written
        """
        backlog = Backlog(items=list(items))
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(backlog.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning(f"Failed to save backlog to {self.path}: {e}")
            return False

        logger.debug(f"Saved {len(backlog.items)} items to {self.path}")
        return True
