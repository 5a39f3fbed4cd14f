"""Visibility filter: which items the session currently shows.

The visible set is the subsequence of items that pass the hide-completed
filter, in store order. Positions in that subsequence ("visible positions")
map monotonically onto positions in the full list ("actual indices").
Everything here is recomputed on demand; lists are small.
"""

from typing import List, Optional, Sequence

from backlog.models import BacklogItem


def visible_indices(items: Sequence[BacklogItem], hide_completed: bool) -> List[int]:
    """Actual indices of the items currently displayed, in store order."""
    return [i for i, item in enumerate(items) if not (hide_completed and item.done)]


def visible_to_actual(
    items: Sequence[BacklogItem],
    hide_completed: bool,
    position: int,
) -> Optional[int]:
    """Actual index of the item at visible ``position``, or None if out of range."""
    indices = visible_indices(items, hide_completed)
    if 0 <= position < len(indices):
        return indices[position]
    return None


def actual_to_visible(
    items: Sequence[BacklogItem],
    hide_completed: bool,
    actual: int,
) -> Optional[int]:
    """Visible position of the item at ``actual``, or None if it is hidden."""
    for position, index in enumerate(visible_indices(items, hide_completed)):
        if index == actual:
            return position
    return None


def clamp_selection(selected: int, visible_count: int) -> int:
    """Clamp a selection into ``[0, max(0, visible_count - 1)]``."""
    if visible_count <= 0:
        return 0
    return max(0, min(selected, visible_count - 1))
