"""Resource existence checks.

:func:`require` is the single primitive every other stage routes through.  It
accepts a resource *kind* (``file`` or ``directory``), a path and a short
label used in error text.  The only side effect is the creation of a missing
directory whose parent already exists; a missing file is never remedied.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

import structlog

from .errors import ValidationError

log = structlog.get_logger()


class ResourceKind(str, Enum):
    """Kinds of resource understood by :func:`require`."""

    FILE = "file"
    DIRECTORY = "directory"


def _require_file(path: Path, label: str) -> Path:
    if path.is_file():
        return path
    if path.is_dir():
        raise ValidationError(f"{label} file is a directory: {path}")
    raise ValidationError(f"{label} file does not exist: {path}")


def _require_directory(path: Path, label: str) -> Path:
    if path.is_dir():
        return path
    if path.exists():
        raise ValidationError(f"{label} directory is a file: {path}")
    if not path.parent.is_dir():
        raise ValidationError(f"{label} directory does not exist: {path}")

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ValidationError(f"{label} directory could not be created: {path} ({exc.strerror})") from exc
    log.info("checks.directory_created", path=str(path), label=label)
    return path


def require(kind: ResourceKind | str, path: str | Path, label: str) -> Path:
    """Ensure *path* exists as a resource of *kind*.

    Args:
        kind: ``"file"`` or ``"directory"`` (or the matching
            :class:`ResourceKind`).
        path: Location to check.
        label: Human readable prefix for error messages (``"Required"``,
            ``"Input"`` …).

    Returns:
        The checked path as a :class:`~pathlib.Path`.

    Raises:
        ValidationError: When the resource has the wrong kind, is absent and
            cannot be created, or *kind* is not recognised.
    """
    raw_kind = kind.value if isinstance(kind, ResourceKind) else kind
    try:
        resolved_kind = ResourceKind(raw_kind)
    except ValueError:
        raise ValidationError(f"Unknown resource type: {raw_kind}") from None

    target = Path(path)
    log.debug("checks.require", kind=resolved_kind.value, path=str(target), label=label)
    if resolved_kind is ResourceKind.FILE:
        return _require_file(target, label)
    return _require_directory(target, label)


__all__ = ["ResourceKind", "require"]
