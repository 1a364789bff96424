"""Reading result sets and writing selections.

A result set file maps resource identifiers to their release outcome:

    default:deployment/helloworld:
      status: success
      per_container:
        - container: app
          current: quay.io/example/app:1.0
          target: quay.io/example/app:2.0

JSON is accepted as well (it is valid YAML), and so are the TitleCase keys
(``Status``, ``Error``, ``PerContainer``, ``Container``...) used by Flux's
JSON output.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, TextIO

import yaml

from .types import ContainerUpdate, ControllerResult, ImageRef, ResourceID, Result, UpdateStatus

logger = logging.getLogger(__name__)


class ResultFormatError(ValueError):
    """The result set could not be parsed."""


def _field(data: dict[str, Any], name: str, default: Any = None) -> Any:
    """Look up ``name`` in snake_case or TitleCase form."""
    if name in data:
        return data[name]
    title = "".join(part.capitalize() for part in name.split("_"))
    return data.get(title, default)


def _parse_update(raw: Any) -> ContainerUpdate:
    if not isinstance(raw, dict):
        raise ResultFormatError(f"Container update must be a mapping, got {type(raw).__name__}")
    container = _field(raw, "container")
    current = _field(raw, "current")
    target = _field(raw, "target")
    if not container or not current or not target:
        raise ResultFormatError(f"Container update needs container, current and target: {raw!r}")
    try:
        return ContainerUpdate(
            container=str(container),
            current=ImageRef.parse(str(current)),
            target=ImageRef.parse(str(target)),
        )
    except ValueError as e:
        raise ResultFormatError(str(e)) from e


def _parse_controller(raw: Any) -> ControllerResult:
    if not isinstance(raw, dict):
        raise ResultFormatError(f"Result must be a mapping, got {type(raw).__name__}")
    try:
        status = UpdateStatus.from_string(str(_field(raw, "status", "unknown")))
    except ValueError as e:
        raise ResultFormatError(str(e)) from e
    updates = _field(raw, "per_container") or []
    if not isinstance(updates, list):
        raise ResultFormatError("per_container must be a list")
    return ControllerResult(
        status=status,
        error=str(_field(raw, "error") or ""),
        per_container=[_parse_update(u) for u in updates],
    )


def parse_result(data: Any) -> Result:
    """Build a Result from already-decoded data.

    Raises:
        ResultFormatError: If the data does not describe a result set.
    """
    if data is None:
        return Result()
    if not isinstance(data, dict):
        raise ResultFormatError(f"Result set must be a mapping, got {type(data).__name__}")

    result = Result()
    for key, raw in data.items():
        try:
            resource_id = ResourceID.parse(str(key))
        except ValueError as e:
            raise ResultFormatError(str(e)) from e
        result[resource_id] = _parse_controller(raw)
    logger.debug("Loaded %d resource result(s)", len(result))
    return result


def load_result(source: str | Path | TextIO) -> Result:
    """Load a result set from a path or an open stream.

    Raises:
        ResultFormatError: If the content is not valid YAML/JSON or has the
            wrong shape.
        OSError: If the file cannot be read.
    """
    try:
        if isinstance(source, (str, Path)):
            with open(source) as f:
                data = yaml.safe_load(f)
        else:
            data = yaml.safe_load(source)
    except yaml.YAMLError as e:
        raise ResultFormatError(f"Invalid result set: {e}") from e
    return parse_result(data)


def selection_to_dict(selection: dict[ResourceID, list[ContainerUpdate]]) -> dict[str, list[dict]]:
    return {
        str(resource_id): [update.to_dict() for update in updates]
        for resource_id, updates in selection.items()
    }


def dump_selection(selection: dict[ResourceID, list[ContainerUpdate]]) -> str:
    """Serialize a selection as JSON, keeping resource and update order."""
    return json.dumps(selection_to_dict(selection), indent=2)
