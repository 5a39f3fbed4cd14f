"""
Global index of repositories that have a backlog.

The index is plain per-user state with an explicit load-mutate-save cycle
scoped to each command that touches it.
"""

from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from backlog.logging_config import get_logger
from backlog.models import GlobalIndex
from backlog.services.repo_locator import get_global_index_path

logger = get_logger(__name__)


class GlobalIndexStore:
    """Loads and saves the global index file."""

    def __init__(self, path: Optional[Path] = None):
        self.path = path or get_global_index_path()

    def load(self) -> GlobalIndex:
        """Read the index; missing or malformed files give an empty index."""
        if not self.path.exists():
            return GlobalIndex()

        try:
            return GlobalIndex.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.warning(f"Could not read global index {self.path}, treating as empty: {e}")
            return GlobalIndex()

    def save(self, index: GlobalIndex) -> bool:
        """
        Write the index to disk.

        Returns:
            True on success, False if the file could not be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(index.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning(f"Failed to save global index to {self.path}: {e}")
            return False
        return True


def register_repo(repo_path: str, store: Optional[GlobalIndexStore] = None) -> None:
    """
    Record a repository in the global index if it is not there yet.

    Failures to write the index are logged and otherwise ignored.

    Args:
        repo_path: Repository root path
        store: Index store to use (defaults to the configured location)
    """
    store = store or GlobalIndexStore()
    index = store.load()
    if index.register(repo_path):
        logger.info(f"Registered repository {repo_path} in global index")
        store.save(index)
