"""Release menu: a table of pending container updates.

The menu can print a one-time listing with ``print()``, or enter
interactive mode with ``run()``, where the user moves a cursor over the
selectable rows, deselects updates with space and confirms with Enter.

Example:
    from release_picker import Menu

    menu = Menu(result, verbosity=1)
    try:
        selected = menu.run()  # {ResourceID: [ContainerUpdate, ...]}
    except Aborted:
        ...
"""

from __future__ import annotations

from typing import Callable, TextIO

import readchar
from rich.console import Console

from .errors import Aborted, InputFailure, NoChanges
from .items import MenuItem, UpdateItem, build_items
from .keys import is_confirm, is_next, is_previous, is_quit, is_toggle
from .themes import DEFAULT_THEME, Theme
from .types import ContainerUpdate, ResourceID, Result
from .writer import ClearableLineWriter

KeySource = Callable[[], str]
Selection = dict[ResourceID, list[ContainerUpdate]]


class Menu:
    """Presents a list of resources and their container updates.

    Args:
        result: Result set to present.
        verbosity: Which resources to include:
                   2 = skipped and ignored too, 1 = skipped but not ignored,
                   0 = neither.
        console: Rich Console to draw on (creates new one if None).
        theme: Glyphs and colours for the table.
        read_key: Blocking callable returning one key per call
                  (defaults to ``readchar.readkey``).
        width: Terminal width override; sampled from the terminal if None.
    """

    def __init__(
        self,
        result: Result,
        verbosity: int = 0,
        console: Console | None = None,
        theme: Theme | None = None,
        read_key: KeySource | None = None,
        width: int | None = None,
    ):
        self.console = console or Console(highlight=False)
        self.out = ClearableLineWriter(self.console, width=width)
        self.theme = theme or DEFAULT_THEME
        self.read_key = read_key or readchar.readkey
        self.items: list[MenuItem] = build_items(result, verbosity)
        self.selectable = sum(1 for item in self.items if item.checkable)
        self.cursor = 0
        self._checkable = [item for item in self.items if isinstance(item, UpdateItem)]

    # -- rendering -----------------------------------------------------------

    def _render_item(self, item: MenuItem, inline: bool) -> str:
        if inline:
            return f"\t\t{item.describe()}"
        return f"{item.resource_id}\t{item.status}\t{item.describe()}"

    def _render_interactive_item(self, item: MenuItem, inline: bool, index: int) -> str:
        pointer = self.theme.cursor_icon if item.checkable and index == self.cursor else " "
        return f"{pointer}{item.checkbox(self.theme)} {self._render_item(item, inline)}"

    def _item_style(self, item: MenuItem, index: int) -> str | None:
        if not isinstance(item, UpdateItem):
            return None
        if index == self.cursor:
            return self.theme.cursor_color
        return self.theme.checked_color if item.checked else self.theme.unchecked_color

    def print(self) -> None:
        """Write the table once, without any interaction."""
        self.out.writeln(self.theme.heading, style=self.theme.heading_color)
        previous = None
        for item in self.items:
            self.out.writeln(self._render_item(item, previous == item.resource_id))
            previous = item.resource_id
        self.out.flush()

    def render(self) -> None:
        """Erase the previous frame and draw the current state in its place."""
        self.out.clear()
        self.out.writeln("   " + self.theme.heading, style=self.theme.heading_color)
        index = 0
        previous = None
        for item in self.items:
            inline = previous == item.resource_id
            self.out.writeln(
                self._render_interactive_item(item, inline, index),
                style=self._item_style(item, index),
            )
            previous = item.resource_id
            if item.checkable:
                index += 1
        self.out.writeln("")
        self.out.writeln(self.theme.instructions)
        self.out.flush()

    # -- state ---------------------------------------------------------------

    def toggle_selected(self) -> None:
        self._checkable[self.cursor].toggle()

    def cursor_down(self) -> None:
        self.cursor = (self.cursor + 1) % self.selectable

    def cursor_up(self) -> None:
        self.cursor = (self.cursor + self.selectable - 1) % self.selectable

    def selected(self) -> Selection:
        """Checked updates grouped by resource, in row order."""
        specs: Selection = {}
        for item in self._checkable:
            if item.checked:
                specs.setdefault(item.resource_id, []).append(item.update)
        return specs

    def _next_key(self) -> str:
        try:
            key = self.read_key()
        except KeyboardInterrupt:
            raise Aborted() from None
        except Exception as exc:
            raise InputFailure(f"Failed to read key: {exc}") from exc
        if not key:
            raise InputFailure("Input stream closed")
        return key

    def _handle_key(self, key: str) -> bool:
        """Apply a key to the menu state. Returns True if it changed."""
        if is_quit(key):
            raise Aborted()
        if is_toggle(key):
            self.toggle_selected()
        elif is_next(key):
            self.cursor_down()
        elif is_previous(key):
            self.cursor_up()
        else:
            return False
        return True

    def run(self) -> Selection:
        """Start the interactive menu and block until the user confirms.

        Returns:
            Selected updates keyed by resource; empty if everything was
            deselected.

        Raises:
            NoChanges: Nothing selectable, raised before reading any key.
            Aborted: The user quit (q, Escape or Ctrl+C).
            InputFailure: The key source failed.
        """
        if self.selectable == 0:
            raise NoChanges()

        with self.out.hidden_cursor():
            self.render()
            while True:
                key = self._next_key()
                if is_confirm(key):
                    self.out.writeln("")
                    self.out.flush()
                    return self.selected()
                if self._handle_key(key):
                    self.render()


def print_results(
    out: TextIO | Console | None,
    result: Result,
    verbosity: int = 0,
    theme: Theme | None = None,
) -> None:
    """Print a one-time listing of ``result`` to ``out``.

    Args:
        out: File-like object or Rich Console (stdout if None).
        result: Result set to list.
        verbosity: See Menu.
        theme: Optional theme for the heading.
    """
    if isinstance(out, Console):
        console = out
    else:
        console = Console(file=out, highlight=False)
    Menu(result, verbosity, console=console, theme=theme).print()
