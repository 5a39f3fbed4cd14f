"""List renderer for the interactive backlog.

Draws the visible rows into a fixed rectangle of character cells through a
small ``Canvas`` capability (``draw_char``), so the layout rules can be
exercised without a terminal:

1. A box border with the title is drawn around the area.
2. Each row gets a fixed-width prefix (``"{num}. [x] "``); the rest of the
   inner width is the text column.
3. Descriptions are cut into hard chunks of exactly ``text_width`` code
   points (no word wrap). The prefix is drawn on the first line only;
   continuation lines are indented with blanks.
4. Done rows are dimmed, the selected row is reversed on top of that, and
   every line is padded to the full inner width in the row's style.
5. Drawing stops when the inner height is used up.

An area too small for rows draws only its border (or nothing at all).
"""

from typing import List, Optional, Protocol, Sequence, Tuple

from rich.segment import Segment
from rich.style import Style
from textual.geometry import Region

from backlog.models import BacklogItem
from backlog.ui.theme import BASE_STYLE, BORDER_STYLE, TITLE_STYLE, row_style

# "1. [x] " plus one column of breathing room
PREFIX_WIDTH = 8

# Inner widths below this draw the border only
MIN_INNER_WIDTH = 10

Row = Tuple[int, BacklogItem]


class Canvas(Protocol):
    """Anything that can receive styled characters at cell coordinates."""

    def draw_char(self, x: int, y: int, char: str, style: Style) -> None:
        ...


class GridCanvas:
    """A fixed grid of styled cells.

    Writes outside the grid are ignored. Used directly by tests and by the
    list widget, which turns each row into Rich segments.
    """

    def __init__(self, width: int, height: int, style: Style = BASE_STYLE) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self._cells: List[List[Tuple[str, Style]]] = [
            [(" ", style) for _ in range(self.width)] for _ in range(self.height)
        ]

    def draw_char(self, x: int, y: int, char: str, style: Style) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self._cells[y][x] = (char, style)

    def style_at(self, x: int, y: int) -> Style:
        return self._cells[y][x][1]

    def row_text(self, y: int) -> str:
        return "".join(char for char, _ in self._cells[y])

    def lines(self) -> List[str]:
        return [self.row_text(y) for y in range(self.height)]

    def row_segments(self, y: int) -> List[Segment]:
        """Merge runs of equally styled cells in row ``y`` into segments."""
        segments: List[Segment] = []
        run_text = ""
        run_style: Optional[Style] = None
        for char, style in self._cells[y]:
            if run_style is not None and style != run_style:
                segments.append(Segment(run_text, run_style))
                run_text = ""
            run_text += char
            run_style = style
        if run_text:
            segments.append(Segment(run_text, run_style))
        return segments


def wrap_description(description: str, text_width: int) -> List[str]:
    """Cut a description into chunks of exactly ``text_width`` code points.

    The last chunk may be shorter. An empty description or a non-positive
    width yields the description unchanged as a single line.

    Examples:
        >>> wrap_description("abcdefghij", 5)
        ['abcde', 'fghij']
    """
    if text_width <= 0 or not description:
        return [description]
    return [description[i:i + text_width] for i in range(0, len(description), text_width)]


def text_width_for(inner_width: int) -> int:
    """Width of the text column for a given inner width."""
    return max(0, inner_width - PREFIX_WIDTH)


def inner_region(area: Region) -> Region:
    """The area inside the one-cell border."""
    return Region(area.x + 1, area.y + 1, max(0, area.width - 2), max(0, area.height - 2))


def row_line_counts(rows: Sequence[Row], inner_width: int) -> List[int]:
    """Terminal lines each row occupies once wrapped to ``inner_width``."""
    text_width = text_width_for(inner_width)
    return [len(wrap_description(item.description, text_width)) for _, item in rows]


def draw_border(canvas: Canvas, area: Region, title: str) -> None:
    """Draw a box around ``area`` with ``title`` on the top edge."""
    if area.width < 2 or area.height < 2:
        return

    right = area.x + area.width - 1
    bottom = area.y + area.height - 1
    for x in range(area.x + 1, right):
        canvas.draw_char(x, area.y, "─", BORDER_STYLE)
        canvas.draw_char(x, bottom, "─", BORDER_STYLE)
    for y in range(area.y + 1, bottom):
        canvas.draw_char(area.x, y, "│", BORDER_STYLE)
        canvas.draw_char(right, y, "│", BORDER_STYLE)
    canvas.draw_char(area.x, area.y, "┌", BORDER_STYLE)
    canvas.draw_char(right, area.y, "┐", BORDER_STYLE)
    canvas.draw_char(area.x, bottom, "└", BORDER_STYLE)
    canvas.draw_char(right, bottom, "┘", BORDER_STYLE)

    for offset, char in enumerate(title[:area.width - 2]):
        canvas.draw_char(area.x + 1 + offset, area.y, char, TITLE_STYLE)


def render_backlog_list(
    canvas: Canvas,
    area: Region,
    rows: Sequence[Row],
    selected: int,
    scroll_offset: int,
    title: str,
    renumber: bool,
) -> int:
    """Draw the visible rows into ``area``.

    Args:
        canvas: Target for the styled characters
        area: Rectangle to draw in, border included
        rows: Visible items as (actual index, item), in store order
        selected: Visible position of the selected row
        scroll_offset: Visible position of the first row to draw
        title: Text shown on the top border
        renumber: Number rows 1..N by visible position instead of by
            actual index (used while completed items are hidden)

    The prefix column is a fixed PREFIX_WIDTH wide. From item 100 on the
    number pushes the trailing space out of it, and from 1000 on the
    checkbox is clipped too.

    Returns:
        Number of inner lines drawn
    """
    draw_border(canvas, area, title)

    inner = inner_region(area)
    if inner.width < MIN_INNER_WIDTH or inner.height < 1:
        return 0

    text_width = text_width_for(inner.width)
    y = 0
    for position, (actual, item) in enumerate(rows):
        if position < scroll_offset:
            continue
        if y >= inner.height:
            break

        number = position + 1 if renumber else actual + 1
        prefix = f"{number}. {item.checkbox} "[:PREFIX_WIDTH].ljust(PREFIX_WIDTH)
        style = row_style(item.done, position == selected)

        for line_index, line in enumerate(wrap_description(item.description, text_width)):
            if y >= inner.height:
                break
            lead = prefix if line_index == 0 else " " * PREFIX_WIDTH
            text = (lead + line)[:inner.width].ljust(inner.width)
            for offset, char in enumerate(text):
                canvas.draw_char(inner.x + offset, inner.y + y, char, style)
            y += 1

    return y
