"""Log target naming and stdout/stderr redirection.

Once :func:`redirect_streams` has run, everything the process writes to
stdout or stderr – Python level and file-descriptor level – lands in the log
file for the rest of the process lifetime.  There is no way back.
"""

from __future__ import annotations

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import TextIO

import structlog

from .errors import ValidationError

log = structlog.get_logger()

DATE_FORMAT = "%Y%m%d"
TIME_FORMAT = "%H%M%S"


def capture_timestamp(now: datetime) -> tuple[str, str]:
    """Return ``(current_date, current_time)`` as ``YYYYMMDD`` / ``HHMMSS``."""
    return now.strftime(DATE_FORMAT), now.strftime(TIME_FORMAT)


def log_file_name(program: str, current_date: str, current_time: str) -> str:
    """Return ``<program>_<date>_<time>.log`` using the program's base name."""
    return f"{Path(program).name}_{current_date}_{current_time}.log"


def create_log_file(log_dir: Path, program: str, current_date: str, current_time: str) -> Path:
    """Create the log file for this run and return its path.

    Raises:
        ValidationError: When the file cannot be created.
    """
    path = Path(log_dir) / log_file_name(program, current_date, current_time)
    try:
        path.touch()
    except OSError as exc:
        raise ValidationError(f"Log file could not be created: {path} ({exc.strerror})") from exc
    return path


def redirect_streams(path: Path, *, dup_fds: bool = True) -> TextIO:
    """Point stdout and stderr at *path* permanently.

    Args:
        path: Log file, opened for appending with line buffering.
        dup_fds: Also rebind file descriptors 1 and 2 so child processes and
            C extensions write to the log as well.

    Returns:
        The open file object now installed as ``sys.stdout``/``sys.stderr``.

    Raises:
        ValidationError: When the file cannot be opened.
    """
    try:
        handle = open(path, "a", encoding="utf-8", buffering=1)
    except OSError as exc:
        raise ValidationError(f"Log file could not be opened: {path} ({exc.strerror})") from exc

    for stream in (sys.stdout, sys.stderr):
        if stream is not None:
            stream.flush()

    if dup_fds:
        for fd in (1, 2):
            os.dup2(handle.fileno(), fd)

    sys.stdout = handle
    sys.stderr = handle
    log.debug("logfile.redirected", path=str(path))
    return handle


__all__ = [
    "DATE_FORMAT",
    "TIME_FORMAT",
    "capture_timestamp",
    "create_log_file",
    "log_file_name",
    "redirect_streams",
]
