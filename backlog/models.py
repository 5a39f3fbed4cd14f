"""
Pydantic models for backlog.

Defines the persisted data structures: backlog items, the per-repository
backlog file, and the global index of repositories that have a backlog.
"""

from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class BacklogItem(BaseModel):
    """
    Represents a single backlog entry.

    Items are owned by the backlog they belong to; their position in
    ``Backlog.items`` is their identity for numbering and reordering.
    """

    description: str = Field(..., description="Free-form item text")
    created_at: datetime = Field(default_factory=utc_now, description="Creation timestamp")
    done: bool = Field(default=False, description="Whether the item is completed")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "description": "Write release notes",
                "created_at": "2025-01-14T10:00:00Z",
                "done": False,
            }
        }
    )

    @property
    def checkbox(self) -> str:
        """Checkbox glyph used by every listing: ``[x]`` or ``[ ]``."""
        return "[x]" if self.done else "[ ]"


class Backlog(BaseModel):
    """
    The contents of one repository's backlog file.

    Order is significant and is never changed implicitly.
    """

    items: List[BacklogItem] = Field(default_factory=list, description="Items in display order")


class GlobalIndex(BaseModel):
    """Repositories known to have a backlog, in registration order."""

    repos: List[str] = Field(default_factory=list, description="Repository root paths")

    def register(self, repo_path: str) -> bool:
        """
        Add a repository path if it is not already present.

        Args:
            repo_path: Repository root path

        Returns:
            True if the index changed
        """
        if repo_path in self.repos:
            return False
        self.repos.append(repo_path)
        return True
