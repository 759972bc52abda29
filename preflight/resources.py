"""Expansion of named resource files below the storage root."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import structlog

from .checks import ResourceKind, require

log = structlog.get_logger()

RESOURCE_LABEL = "Resource"


def resource_name(index: int) -> str:
    """Return the binding name for the 1-based *index* (``resource1`` …)."""
    return f"resource{index}"


def expand_resources(resources_dir: Path, names: Sequence[str]) -> list[Path]:
    """Resolve every name under *resources_dir* and require it as a file.

    Order is preserved: the first entry becomes ``resource1``, the second
    ``resource2`` and so on.  Expansion stops at the first missing file.

    Raises:
        ValidationError: When a resource is absent or is a directory.
    """
    bound: list[Path] = []
    for index, name in enumerate(names, start=1):
        path = require(ResourceKind.FILE, Path(resources_dir) / name, RESOURCE_LABEL)
        bound.append(path)
        log.debug("resources.bound", name=resource_name(index), path=str(path))
    return bound


__all__ = ["RESOURCE_LABEL", "expand_resources", "resource_name"]
