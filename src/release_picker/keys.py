"""Keyboard input helpers for the release menu.

Keys arrive as decoded strings from ``readchar.readkey()``; readchar maps
the platform's arrow key codes onto ``readchar.key.UP``/``DOWN``.
"""

from __future__ import annotations

import readchar


def is_escape(key: str) -> bool:
    """Check if key is Escape.

    readchar reads on after a lone Escape, so it can arrive merged with the
    next keypress (Escape+x, Escape+Escape). Sequences continuing with "["
    or "O" are cursor keys, not Escape.
    """
    if key in (readchar.key.UP, readchar.key.DOWN):
        return False
    return key.startswith("\x1b") and key[1:2] not in ("[", "O")


def is_quit(key: str) -> bool:
    """Check if key aborts the menu (Ctrl+C, Escape or q)."""
    return key in (readchar.key.CTRL_C, "\x03", "q") or is_escape(key)


def is_toggle(key: str) -> bool:
    """Check if key is space."""
    return key == " "


def is_confirm(key: str) -> bool:
    """Check if key is Enter/Return."""
    return key in (readchar.key.ENTER, "\r", "\n")


def is_next(key: str) -> bool:
    """Check if key is Tab, down arrow or vim 'j'."""
    return key in (readchar.key.TAB, readchar.key.DOWN, "\t", "j")


def is_previous(key: str) -> bool:
    """Check if key is up arrow or vim 'k'."""
    return key in (readchar.key.UP, "k")
