"""Configurable theme for the release menu.

The Theme dataclass holds the glyphs, headings and colours used when
rendering the table. Colours use Rich style syntax (e.g. "green", "bold cyan").
"""

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for the menu table.

    Attributes:
        cursor_icon: Glyph marking the row under the cursor.
        checked_icon: Checkbox glyph for a selected update.
        unchecked_icon: Checkbox glyph for a deselected update.
        heading: Tab-separated column heading.
        instructions: Line shown under the table in interactive mode.

        cursor_color: Style for the row under the cursor.
        checked_color: Style for selected update rows.
        unchecked_color: Style for deselected update rows.
        heading_color: Style for the heading line.
    """

    # Icons
    cursor_icon: str = "⇒"
    checked_icon: str = "◉"
    unchecked_icon: str = "◯"

    # Text
    heading: str = "CONTROLLER \tSTATUS \tUPDATES"
    instructions: str = (
        "Use arrow keys and [Space] to deselect containers; hit [Enter] to release selected."
    )

    # Colors
    cursor_color: str = "bold cyan"
    checked_color: str = ""
    unchecked_color: str = "dim"
    heading_color: str = "bold"


# Default theme used when none is specified
DEFAULT_THEME = Theme()
