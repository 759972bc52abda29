"""Rendering of usage and error text shown when the bootstrap stops."""

from __future__ import annotations

from pathlib import Path

import click

from .errors import PreflightError, UsageError

NO_USAGE = "No usage notes; please read the script."
SEPARATOR = "---"


def format_usage(program: str, usage_text: str = "", message: str = "") -> str:
    """Return the usage block.

    An optional context *message* is printed first followed by a separator
    line.  Only the base name of *program* is shown.  The usage text is
    emitted exactly as supplied after it, so callers control the trailing
    newline.
    """
    parts: list[str] = []
    if message:
        parts.append(f"{message}\n{SEPARATOR}\n")
    if usage_text:
        parts.append(f"{Path(program).name} {usage_text}")
    else:
        parts.append(f"{NO_USAGE}\n")
    return "".join(parts)


def render_error(err: PreflightError, *, program: str, usage_text: str = "") -> str:
    """Return the text shown for *err*: usage for usage errors, else the message."""
    if isinstance(err, UsageError):
        return format_usage(program, usage_text, err.message)
    return f"{err}\n"


def echo_error(err: PreflightError, *, program: str, usage_text: str = "") -> None:
    """Write the rendered text for *err* to stdout."""
    click.echo(render_error(err, program=program, usage_text=usage_text), nl=False)


__all__ = ["NO_USAGE", "SEPARATOR", "echo_error", "format_usage", "render_error"]
