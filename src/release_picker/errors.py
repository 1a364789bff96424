"""Exceptions raised by the interactive menu.

The three kinds are disjoint and all end the session:

- NoChanges: there was nothing to select, raised before reading any input.
- Aborted: the user quit; the selection at that moment is discarded.
- InputFailure: the key source could not produce a keypress.
"""


class MenuError(Exception):
    """Base class for menu session failures."""


class NoChanges(MenuError):
    def __init__(self, message: str = "No changes found."):
        super().__init__(message)


class Aborted(MenuError):
    def __init__(self, message: str = "Aborted."):
        super().__init__(message)


class InputFailure(MenuError):
    """The key source failed or its stream was closed."""
