"""release-picker: review and select pending container image updates.

Example:
    from release_picker import Menu, load_result

    menu = Menu(load_result("results.yaml"), verbosity=1)
    selected = menu.run()  # {ResourceID: [ContainerUpdate, ...]}
"""

__version__ = "0.1.0"

from .errors import Aborted, InputFailure, MenuError, NoChanges
from .items import InfoItem, MenuItem, UpdateItem, build_items
from .menu import Menu, print_results
from .results import ResultFormatError, dump_selection, load_result
from .themes import DEFAULT_THEME, Theme
from .types import (
    ContainerUpdate,
    ControllerResult,
    ImageRef,
    ResourceID,
    Result,
    UpdateStatus,
)
from .writer import ClearableLineWriter, TabWriter

__all__ = [
    # Main classes
    "Menu",
    "print_results",
    # Rows
    "MenuItem",
    "InfoItem",
    "UpdateItem",
    "build_items",
    # Result sets
    "Result",
    "ControllerResult",
    "ContainerUpdate",
    "ImageRef",
    "ResourceID",
    "UpdateStatus",
    "load_result",
    "dump_selection",
    "ResultFormatError",
    # Errors
    "MenuError",
    "NoChanges",
    "Aborted",
    "InputFailure",
    # Output
    "ClearableLineWriter",
    "TabWriter",
    # Theming
    "Theme",
    "DEFAULT_THEME",
]
