"""One Monokai color theme for backlog.

All widgets reference these constants, either through f-string CSS or as
Rich ``Style`` objects for the line-rendered list. Row styles are composed
rather than chosen: the done style is the base and selection is layered on
top, so a selected done row is dimmed and reversed.
"""

from rich.style import Style


# ============================================================================
# BASE COLORS
# ============================================================================

BACKGROUND = "#272822"  # Main application background (dark charcoal)
FOREGROUND = "#F8F8F2"  # Primary text color (off-white)
COMMENT = "#75715E"     # Secondary/dimmed text (muted brown-gray)
BORDER = "#3E3D32"      # Borders and dividers (dark gray-green)
ACCENT = "#66D9EF"      # Focus and input accents (cyan)
RED = "#F92672"         # Destructive confirmations


# ============================================================================
# STATUS COLORS
# ============================================================================

COMPLETE_COLOR = COMMENT  # Dimmed gray for done items


# ============================================================================
# ROW STYLES
# ============================================================================

BASE_STYLE = Style()
BORDER_STYLE = Style(color=BORDER)
TITLE_STYLE = Style(color=FOREGROUND, bold=True)
DONE_STYLE = Style(color=COMPLETE_COLOR)
SELECTED_STYLE = Style(reverse=True)
CURSOR_STYLE = Style(color=BACKGROUND, bgcolor=FOREGROUND)


def row_style(done: bool, selected: bool) -> Style:
    """Compose the style for one list row.

    Args:
        done: Whether the item is done (dimmed base)
        selected: Whether the row is selected (reverse video on top)

    Returns:
        Combined Rich Style
    """
    style = DONE_STYLE if done else BASE_STYLE
    if selected:
        style = style + SELECTED_STYLE
    return style
