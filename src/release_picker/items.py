"""Menu rows built from a release result set.

Each resource in a result set becomes one or more rows:

- UpdateItem: one container update that can be selected or deselected.
- InfoItem: a purely informational row, carrying the resource's error or
  standing in for a resource with no changes.
"""

from __future__ import annotations

from dataclasses import dataclass

from .themes import DEFAULT_THEME, Theme
from .types import ContainerUpdate, ResourceID, Result, UpdateStatus


@dataclass
class MenuItem:
    """Base class for menu rows.

    Attributes:
        resource_id: Resource the row belongs to; rows sharing it are grouped.
        status: Release outcome of that resource.
    """

    resource_id: ResourceID
    status: UpdateStatus

    @property
    def checkable(self) -> bool:
        return False

    def describe(self) -> str:
        """Text for the UPDATES column."""
        raise NotImplementedError

    def checkbox(self, theme: Theme = DEFAULT_THEME) -> str:
        return " "


@dataclass
class InfoItem(MenuItem):
    """Non-selectable row: an error, or a "no changes" placeholder when None."""

    error: str | None = None

    def describe(self) -> str:
        return self.error or ""


@dataclass
class UpdateItem(MenuItem):
    """Selectable row for a single container update.

    ``error`` is set on the first update of a resource that also reported an
    error, so the message is shown without adding a row.
    """

    update: ContainerUpdate
    checked: bool = True
    error: str | None = None

    @property
    def checkable(self) -> bool:
        return True

    def describe(self) -> str:
        if self.error:
            return f"{self.update.describe()} ({self.error})"
        return self.update.describe()

    def checkbox(self, theme: Theme = DEFAULT_THEME) -> str:
        return theme.checked_icon if self.checked else theme.unchecked_icon

    def toggle(self) -> None:
        self.checked = not self.checked


def is_visible(status: UpdateStatus, verbosity: int) -> bool:
    """Whether a resource with ``status`` is listed at ``verbosity``.

    - 2 = include skipped and ignored resources
    - 1 = include skipped resources, exclude ignored resources
    - 0 = exclude skipped and ignored resources
    """
    if status == UpdateStatus.IGNORED:
        return verbosity >= 2
    if status == UpdateStatus.SKIPPED:
        return verbosity >= 1
    return True


def build_items(result: Result, verbosity: int = 0) -> list[MenuItem]:
    """Flatten a result set into ordered menu rows.

    Resources are visited in ``result.resource_ids()`` order and filtered by
    verbosity before any row is made, so a hidden resource contributes none.
    """
    items: list[MenuItem] = []
    for resource_id in result.resource_ids():
        outcome = result[resource_id]
        if not is_visible(outcome.status, verbosity):
            continue

        if not outcome.per_container:
            items.append(InfoItem(resource_id, outcome.status, error=outcome.error or None))
            continue
        for i, update in enumerate(outcome.per_container):
            error = (outcome.error or None) if i == 0 else None
            items.append(UpdateItem(resource_id, outcome.status, update=update, error=error))
    return items
