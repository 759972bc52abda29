"""Default resolution for the three configuration slots."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import structlog

from .checks import ResourceKind, require
from .config.schema import SLOTS, BootstrapConfig

log = structlog.get_logger()

CORE_LABEL = "Core resource"


def default_slots(home: Optional[Path] = None) -> dict[str, Path]:
    """Return the default value for each slot.

    The log and temporary directories live below the *default* storage root,
    independent of any override the caller applies to ``resources_dir``.

    Args:
        home: Base directory; defaults to the user's home directory.
    """
    base = (home if home is not None else Path.home()) / "scripts"
    return {
        "resources_dir": base,
        "log_dir": base / "logs",
        "temp_dir": base / "tmp",
    }


def resolve_defaults(config: BootstrapConfig, *, home: Optional[Path] = None) -> BootstrapConfig:
    """Fill unset slots with their defaults and make sure they exist.

    Slots are processed in a fixed order so error reporting is predictable.
    Slots the caller already set are returned untouched.

    Raises:
        ValidationError: When a default cannot be used as a directory.
    """
    defaults = default_slots(home)
    updates: dict[str, Path] = {}
    for slot in SLOTS:
        if getattr(config, slot) is not None:
            continue
        value = defaults[slot]
        require(ResourceKind.DIRECTORY, value, CORE_LABEL)
        updates[slot] = value
        log.debug("defaults.slot_resolved", slot=slot, path=str(value))
    return config.model_copy(update=updates) if updates else config


__all__ = ["CORE_LABEL", "default_slots", "resolve_defaults"]
