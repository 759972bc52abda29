"""Root privilege gate."""

from __future__ import annotations

import os
from typing import Optional

import structlog

from .config.schema import BootstrapConfig
from .errors import ValidationError

log = structlog.get_logger()

ROOT_UID = 0


def effective_uid() -> int:
    """Return the effective user id, or ``-1`` where the platform has none."""
    geteuid = getattr(os, "geteuid", None)
    return geteuid() if geteuid is not None else -1


def check_privilege(config: BootstrapConfig, *, euid: Optional[int] = None) -> None:
    """Abort unless the process runs as root when the config demands it.

    Args:
        config: Active configuration; only ``require_root`` is consulted.
        euid: Effective uid to test; defaults to :func:`effective_uid`.

    Raises:
        ValidationError: When root is required and *euid* is not ``0``.
    """
    if not config.require_root:
        return
    uid = effective_uid() if euid is None else euid
    if uid != ROOT_UID:
        log.warning("privilege.denied", euid=uid)
        raise ValidationError(f"UID: {uid}. This script must be run as root.")


__all__ = ["ROOT_UID", "check_privilege", "effective_uid"]
