"""Fatal conditions raised by the bootstrap stages.

Two categories exist and they are never recovered locally:

* :class:`UsageError` – the invocation has the wrong shape (missing flag,
  missing positional argument, unknown option).  Usage text is shown and the
  process exits with status ``0``.
* :class:`ValidationError` – a filesystem mismatch or policy violation.  A
  single message is shown and the process exits with status ``1``.

Stages raise; only :func:`preflight.driver.run` and the CLI translate an
error into process termination.
"""

from __future__ import annotations


class PreflightError(RuntimeError):
    """Base class for every fatal bootstrap condition."""

    category: str = "validation"
    exit_code: int = 1

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class UsageError(PreflightError):
    """Raised when the invocation is malformed; usage text should be shown."""

    category = "usage"
    exit_code = 0


class ValidationError(PreflightError):
    """Raised when a precondition fails on disk or by policy."""

    category = "validation"
    exit_code = 1

    def __str__(self) -> str:
        return self.message or "An unknown error occurred."


__all__ = ["PreflightError", "UsageError", "ValidationError"]
