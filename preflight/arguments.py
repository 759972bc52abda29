"""Positional argument validation."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from .checks import require
from .errors import UsageError

INPUT_LABEL = "Input"


def check_arguments(args_type: Optional[str], args: Sequence[str]) -> list[Path]:
    """Require at least one positional argument of kind *args_type*.

    Does nothing when *args_type* is unset.  Each argument goes through
    :func:`~preflight.checks.require`; the first failure is raised.

    Raises:
        UsageError: When no positional argument remains.
        ValidationError: When an argument fails its check or *args_type* is
            not a known resource kind.
    """
    if not args_type:
        return []
    if not args:
        raise UsageError(f"No input {args_type} specified.")
    return [require(args_type, arg, INPUT_LABEL) for arg in args]


__all__ = ["INPUT_LABEL", "check_arguments"]
