"""
Pydantic model describing what a calling script asks the bootstrap to do.

The model is the explicit replacement for a set of loosely named shell
variables: every stage receives a :class:`BootstrapConfig` and returns an
updated copy instead of reading and writing ambient state.

Notes:
* List fields accept either a list or a whitespace separated string so that
  values can be copied verbatim from environment variables or YAML scalars.
* ``require_root`` and ``enable_log`` follow the "any non-empty value" rule.
* The model is frozen; use :meth:`BootstrapConfig.model_copy` to derive an
  updated instance.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Slots resolved by preflight.defaults, in resolution order.
SLOTS: tuple[str, ...] = ("resources_dir", "log_dir", "temp_dir")


def _program_name() -> str:
    return Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "script"


class BootstrapConfig(BaseModel):
    """Caller supplied configuration threaded through every stage.

    Attributes:
        program: Invocation name used in usage text and the log file name.
        resources_dir: Storage root; prefix for ``resources``.
        log_dir: Directory receiving the log file when ``enable_log`` is set.
        temp_dir: Scratch directory.
        usage_text: Help text appended after the program name.
        flags: getopt style option grammar (``"ab:c"``).
        require_root: Abort unless running with effective uid 0.
        enable_log: Redirect stdout/stderr into a fresh log file.
        require_dirs: Variable *names* whose values must be directories.
        require_files: Variable *names* whose values must be files.
        args_type: ``"file"`` or ``"directory"`` when positional arguments
            are required.
        resources: Filenames under ``resources_dir`` bound as ``resourceN``.
        variables: Name to value mapping consulted for ``require_dirs`` and
            ``require_files``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    program: str = Field(default_factory=_program_name)

    resources_dir: Optional[Path] = None
    log_dir: Optional[Path] = None
    temp_dir: Optional[Path] = None

    usage_text: str = ""
    flags: str = ""

    require_root: bool = False
    enable_log: bool = False

    require_dirs: List[str] = Field(default_factory=list)
    require_files: List[str] = Field(default_factory=list)
    args_type: Optional[str] = None
    resources: List[str] = Field(default_factory=list)

    variables: Dict[str, str] = Field(default_factory=dict)

    # --------------------------- validators ------------------------------ #
    @field_validator("resources_dir", "log_dir", "temp_dir", "args_type", mode="before")
    @classmethod
    def _empty_is_unset(cls, value):
        """Treat empty strings as "not supplied"."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("require_dirs", "require_files", "resources", mode="before")
    @classmethod
    def _split_words(cls, value):
        """Split whitespace separated strings, preserving order."""
        if value is None:
            return []
        if isinstance(value, str):
            return value.split()
        return value

    @field_validator("require_root", "enable_log", mode="before")
    @classmethod
    def _non_empty_is_true(cls, value):
        """Any non-empty string switches the feature on."""
        if value is None:
            return False
        if isinstance(value, str):
            return bool(value.strip())
        return value

    @field_validator("variables", mode="before")
    @classmethod
    def _stringify_variables(cls, value):
        """Accept paths and other scalars as variable values."""
        if value is None:
            return {}
        if isinstance(value, dict):
            return {str(k): "" if v is None else str(v) for k, v in value.items()}
        return value

    # --------------------------- convenience ----------------------------- #
    def lookup(self, name: str) -> str:
        """Return the value bound to *name* or ``""`` when unset.

        Caller variables take precedence; the slot names (``resources_dir``,
        ``log_dir``, ``temp_dir``) are consulted afterwards.
        """
        value = self.variables.get(name)
        if value:
            return value
        if name in SLOTS:
            slot = getattr(self, name)
            return str(slot) if slot is not None else ""
        return ""

    def with_variables(self, bindings: Dict[str, str]) -> "BootstrapConfig":
        """Return a copy whose ``variables`` include *bindings*."""
        if not bindings:
            return self
        merged = {**self.variables, **{k: str(v) for k, v in bindings.items()}}
        return self.model_copy(update={"variables": merged})


__all__ = ["BootstrapConfig", "SLOTS"]
