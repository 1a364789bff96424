"""Type definitions for release-picker.

This module provides the shared types describing a release result set:
per-resource outcome statuses, resource and image identifiers, and the
per-container updates a release would apply.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class UpdateStatus(str, Enum):
    """Coarse outcome of a release for one resource."""

    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"
    IGNORED = "ignored"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, value: str) -> "UpdateStatus":
        """Convert a string to UpdateStatus (case-insensitive).

        Raises:
            ValueError: If the string is not a known status.
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            valid = ", ".join(s.value for s in cls)
            raise ValueError(f"Invalid status: {value!r}. Must be one of: {valid}") from None


# Kind assumed for identifiers in the legacy "namespace/name" form.
LEGACY_KIND = "service"


@dataclass(frozen=True, order=True)
class ResourceID:
    """Identifier of a workload, written as ``namespace:kind/name``."""

    namespace: str
    kind: str
    name: str

    def __str__(self) -> str:
        return f"{self.namespace}:{self.kind}/{self.name}"

    @classmethod
    def parse(cls, text: str) -> "ResourceID":
        """Parse ``namespace:kind/name`` or the legacy ``namespace/name``.

        Raises:
            ValueError: If the text matches neither form.
        """
        text = text.strip()
        if ":" in text:
            namespace, _, rest = text.partition(":")
            kind, sep, name = rest.partition("/")
            if namespace and sep and kind and name and "/" not in name:
                return cls(namespace=namespace, kind=kind, name=name)
        else:
            namespace, sep, name = text.partition("/")
            if namespace and sep and name and "/" not in name:
                return cls(namespace=namespace, kind=LEGACY_KIND, name=name)
        raise ValueError(f"Invalid resource ID: {text!r}")


@dataclass(frozen=True)
class ImageRef:
    """Container image reference split into repository name and tag."""

    name: str
    tag: str = ""

    def __str__(self) -> str:
        if self.tag:
            return f"{self.name}:{self.tag}"
        return self.name

    @classmethod
    def parse(cls, text: str) -> "ImageRef":
        """Parse ``repo[:tag]``, keeping registry ports in the name."""
        text = text.strip()
        if not text:
            raise ValueError("Empty image reference")
        slash = text.rfind("/")
        colon = text.rfind(":")
        if colon > slash:
            return cls(name=text[:colon], tag=text[colon + 1 :])
        return cls(name=text)


@dataclass(frozen=True)
class ContainerUpdate:
    """One container's image moving from ``current`` to ``target``."""

    container: str
    current: ImageRef
    target: ImageRef

    def describe(self) -> str:
        return f"{self.container}: {self.current} -> {self.target.tag}"

    def to_dict(self) -> dict[str, str]:
        return {
            "container": self.container,
            "current": str(self.current),
            "target": str(self.target),
        }


@dataclass
class ControllerResult:
    """Outcome of a release for a single resource."""

    status: UpdateStatus
    error: str = ""
    per_container: list[ContainerUpdate] = field(default_factory=list)


class Result(dict):
    """Mapping of ResourceID to ControllerResult."""

    def resource_ids(self) -> list[ResourceID]:
        """Resource identifiers ordered by their string form."""
        return sorted(self, key=str)

    def service_ids(self) -> list[str]:
        """Resource identifiers as strings, in lexical order."""
        return [str(resource_id) for resource_id in self.resource_ids()]
