"""
Locating backlog files on disk.

A backlog lives inside the git repository it belongs to, at
``<repo root>/.todo/backlog.json`` by default. The global index of known
repositories lives in ``~/.backlog``.
"""

from pathlib import Path
from typing import Optional

from backlog.config import Config
from backlog.logging_config import get_logger

logger = get_logger(__name__)

INDEX_FILE_NAME = "index.json"


def find_repo_root(start: Optional[Path] = None) -> Optional[Path]:
    """
    Walk up from ``start`` to the nearest directory containing ``.git``.

    Args:
        start: Directory to start from (defaults to the current directory)

    Returns:
        Repository root, or None when not inside a git repository
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        if (directory / ".git").exists():
            return directory
    logger.debug(f"No git repository found above {current}")
    return None


def backlog_path_for(repo_root: Path, config: Optional[Config] = None) -> Path:
    """Backlog file path inside a given repository root."""
    storage = (config or Config()).get_storage_config()
    return repo_root / storage['todo_dir'] / storage['file_name']


def get_repo_backlog_path(start: Optional[Path] = None, config: Optional[Config] = None) -> Optional[Path]:
    """
    Backlog file path for the repository containing ``start``.

    Returns:
        Path to the backlog file, or None when not inside a git repository
    """
    repo_root = find_repo_root(start)
    if repo_root is None:
        return None
    return backlog_path_for(repo_root, config)


def get_global_dir(config: Optional[Config] = None) -> Path:
    """Directory holding per-user backlog state (the global index)."""
    return (config or Config()).get_storage_config()['global_dir']


def get_global_index_path(config: Optional[Config] = None) -> Path:
    return get_global_dir(config) / INDEX_FILE_NAME
