"""BacklogList widget: the line-rendered list panel.

The widget owns no state of its own. Each frame it asks the session for the
visible rows, lets the session re-derive its scroll offset from the wrapped
line counts, draws everything into a ``GridCanvas`` via the list renderer,
and serves the canvas rows to Textual as strips.
"""

from typing import Optional

from textual.geometry import Region
from textual.strip import Strip
from textual.widget import Widget

from backlog.logging_config import get_logger
from backlog.ui.renderer import (
    GridCanvas,
    inner_region,
    render_backlog_list,
    row_line_counts,
)
from backlog.ui.session import BacklogSession

# Initialize logger for this module
logger = get_logger(__name__)


class BacklogList(Widget):
    """A widget drawing the session's visible items with wrapping and highlight."""

    DEFAULT_CSS = """
    BacklogList {
        width: 100%;
        height: 1fr;
    }
    """

    def __init__(self, session: BacklogSession, **kwargs) -> None:
        """Initialize the list widget.

        Args:
            session: Session whose items and cursor state are drawn
            **kwargs: Additional keyword arguments for Widget
        """
        super().__init__(**kwargs)
        self.session = session
        self._grid: Optional[GridCanvas] = None

    def refresh_view(self) -> None:
        """Discard the drawn grid and repaint from the session."""
        self._grid = None
        self.refresh()

    def on_resize(self) -> None:
        self._grid = None

    def render_line(self, y: int) -> Strip:
        """Render one terminal line of the list panel."""
        grid = self._ensure_grid()
        if y >= grid.height:
            return Strip.blank(self.size.width)
        return Strip(grid.row_segments(y), grid.width)

    def _ensure_grid(self) -> GridCanvas:
        width, height = self.size
        if self._grid is not None and (self._grid.width, self._grid.height) == (width, height):
            return self._grid

        area = Region(0, 0, width, height)
        inner = inner_region(area)
        rows = self.session.visible_rows()
        self.session.adjust_scroll(row_line_counts(rows, inner.width), inner.height)

        grid = GridCanvas(width, height)
        drawn = render_backlog_list(
            grid,
            area,
            rows,
            selected=self.session.selected,
            scroll_offset=self.session.scroll_offset,
            title=self.session.title,
            renumber=self.session.hide_completed,
        )
        logger.debug(
            f"BacklogList: drew {drawn} lines for {len(rows)} rows "
            f"(size={width}x{height}, scroll={self.session.scroll_offset})"
        )
        self._grid = grid
        return grid
