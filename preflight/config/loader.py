"""
YAML / environment configuration loader.

Builds a :class:`preflight.config.schema.BootstrapConfig` from up to three
sources.  Precedence for **each** key (first match wins):

1. An explicit keyword override passed to :func:`load_config`.
2. The environment variable ``PREFLIGHT_<KEY>`` (e.g. ``PREFLIGHT_LOG_DIR``).
3. The YAML document.
4. The model default.

YAML search order (first existing file wins):

1. The explicit *path* argument.
2. ``$PREFLIGHT_CONFIG``.
3. ``./preflight.yaml`` in the working directory.

A missing document is not an error; every key simply falls through to the
next source.  The document must use the fixed vocabulary of
:class:`BootstrapConfig`; unknown keys are rejected.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping, Optional

import structlog
import yaml

from ..errors import ValidationError
from .schema import BootstrapConfig

log = structlog.get_logger()

_ENV_PREFIX = "PREFLIGHT_"
_ENV_CONFIG = "PREFLIGHT_CONFIG"
_LOCAL_NAME = "preflight.yaml"

# Keys that may be supplied through the environment.  ``variables`` is a
# mapping and therefore only settable from YAML or keyword overrides.
_ENV_KEYS: tuple[str, ...] = tuple(
    name for name in BootstrapConfig.model_fields if name != "variables"
)


def _first_existing(*candidates: Optional[Path]) -> Optional[Path]:
    """Return the first candidate that exists on disk."""
    for p in candidates:
        if p is not None and p.is_file():
            return p
    return None


def _resolve_yaml(explicit: Optional[Path], environ: Mapping[str, str]) -> Optional[Path]:
    """Locate the YAML document according to the module precedence."""
    if explicit is not None:
        if not explicit.is_file():
            raise ValidationError(f"Configuration file does not exist: {explicit}")
        return explicit
    env_path = environ.get(_ENV_CONFIG)
    return _first_existing(
        Path(env_path).expanduser() if env_path else None,
        Path.cwd() / _LOCAL_NAME,
    )


def _load_yaml(path: Path) -> dict:
    """Read *path* and return its top-level mapping."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValidationError(f"Invalid configuration – {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError(f"Invalid configuration – {path} must contain a mapping")
    return data


def _from_environ(environ: Mapping[str, str]) -> dict[str, str]:
    """Collect ``PREFLIGHT_<KEY>`` values for the known keys."""
    found: dict[str, str] = {}
    for key in _ENV_KEYS:
        value = environ.get(_ENV_PREFIX + key.upper())
        if value is not None:
            found[key] = value
    return found


def load_config(
    path: Optional[str | Path] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
    **overrides: Any,
) -> BootstrapConfig:
    """Return a validated :class:`BootstrapConfig`.

    Args:
        path: Explicit YAML document.  When given it must exist.
        environ: Environment mapping; defaults to :data:`os.environ`.
        **overrides: Keyword values that win over every other source.
            ``None`` values are ignored so CLI callers can pass unset options
            straight through.

    Returns:
        The merged configuration.

    Raises:
        ValidationError: When the document is unreadable or does not match
            the configuration vocabulary.
    """
    environ = os.environ if environ is None else environ
    explicit = Path(path).expanduser() if path else None

    merged: dict[str, Any] = {}
    yaml_path = _resolve_yaml(explicit, environ)
    if yaml_path is not None:
        merged.update(_load_yaml(yaml_path))
        log.debug("config.yaml_loaded", path=str(yaml_path))

    merged.update(_from_environ(environ))
    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return BootstrapConfig(**merged)
    except Exception as exc:  # pydantic.ValidationError or unexpected keywords
        raise ValidationError(f"Invalid configuration – {exc}") from exc


__all__ = ["load_config"]
