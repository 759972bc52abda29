"""
Stage ordering and the single process-exit boundary.

:func:`bootstrap` runs every stage in a fixed order and raises a
:class:`~preflight.errors.PreflightError` subclass at the first fatal
condition:

1. privilege gate
2. default resolution of the storage, log and temporary directories
3. option parsing through the caller's handler
4. timestamp capture and, when requested, log redirection
5. expansion of named resource files
6. required directories and files
7. positional arguments

:func:`run` is what a script calls first thing: it configures logging, runs
:func:`bootstrap` and turns an error into usage/error text on stdout plus a
process exit.  :func:`usage` and :func:`error` give scripts the same exit
path for conditions they detect themselves later on.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, NoReturn, Optional, Sequence

import structlog

from .arguments import check_arguments
from .config.schema import SLOTS, BootstrapConfig
from .defaults import resolve_defaults
from .errors import PreflightError, UsageError, ValidationError
from .logfile import capture_timestamp, create_log_file, redirect_streams
from .options import OptionHandler, parse_options
from .prerequisites import check_prerequisites
from .privilege import check_privilege
from .resources import expand_resources, resource_name
from .usage import echo_error
from .utils.logging import setup_logging

log = structlog.get_logger()


@dataclass
class BootstrapResult:
    """Everything a script needs after a successful bootstrap.

    Attributes:
        config: Configuration with defaults and option bindings applied.
        args: Positional arguments left after option parsing.
        current_date: ``YYYYMMDD`` captured after option parsing.
        current_time: ``HHMMSS`` captured after option parsing.
        log_file: Log file receiving stdout/stderr, or ``None``.
        resources: Named resources in declaration order.
    """

    config: BootstrapConfig
    args: list[str]
    current_date: str
    current_time: str
    log_file: Optional[Path] = None
    resources: list[Path] = field(default_factory=list)

    def resource(self, index: int) -> Path:
        """Return the 1-based *index*-th named resource."""
        if index < 1 or index > len(self.resources):
            raise IndexError(f"No {resource_name(index)} bound")
        return self.resources[index - 1]

    @property
    def variables(self) -> dict[str, str]:
        """Flat name to value view: caller variables, slots and bindings."""
        out = dict(self.config.variables)
        for slot in SLOTS:
            out[slot] = self.config.lookup(slot)
        for index, path in enumerate(self.resources, start=1):
            out[resource_name(index)] = str(path)
        out["current_date"] = self.current_date
        out["current_time"] = self.current_time
        if self.log_file is not None:
            out["log_file"] = str(self.log_file)
        return out


def bootstrap(
    config: BootstrapConfig,
    argv: Optional[Sequence[str]] = None,
    *,
    handler: Optional[OptionHandler] = None,
    home: Optional[Path] = None,
    euid: Optional[int] = None,
    clock: Optional[Callable[[], datetime]] = None,
    redirect: bool = True,
) -> BootstrapResult:
    """Run every stage and return the resolved state.

    Args:
        config: What the calling script requires.
        argv: Arguments without the program name; defaults to
            ``sys.argv[1:]``.
        handler: Per-option callback, required when ``config.flags`` is set.
        home: Base for slot defaults; defaults to the user's home.
        euid: Effective uid override for the privilege gate.
        clock: Returns "now" for the timestamp; defaults to
            :meth:`datetime.now`.
        redirect: When ``False`` the log file is created but stdout/stderr
            are left alone (used by the CLI, which reports the path instead).

    Raises:
        UsageError: When the invocation is malformed.
        ValidationError: When a precondition fails.
    """
    argv = list(sys.argv[1:] if argv is None else argv)

    check_privilege(config, euid=euid)
    config = resolve_defaults(config, home=home)

    bindings, args = parse_options(config.flags, argv, handler)
    config = config.with_variables(bindings)

    current_date, current_time = capture_timestamp((clock or datetime.now)())

    log_file: Optional[Path] = None
    if config.enable_log:
        log_file = create_log_file(config.log_dir, config.program, current_date, current_time)
        if redirect:
            redirect_streams(log_file)

    resources = expand_resources(config.resources_dir, config.resources)
    check_prerequisites(config)
    check_arguments(config.args_type, args)

    log.debug("bootstrap.complete", program=config.program, args=len(args), resources=len(resources))
    return BootstrapResult(
        config=config,
        args=args,
        current_date=current_date,
        current_time=current_time,
        log_file=log_file,
        resources=resources,
    )


def terminate(err: PreflightError, config: BootstrapConfig) -> NoReturn:
    """Print the text for *err* on stdout and exit with its status."""
    echo_error(err, program=config.program, usage_text=config.usage_text)
    sys.exit(err.exit_code)


def usage(config: BootstrapConfig, message: str = "") -> NoReturn:
    """Show the usage text (optionally preceded by *message*) and exit 0."""
    terminate(UsageError(message), config)


def error(config: BootstrapConfig, message: str = "") -> NoReturn:
    """Show *message* and exit 1."""
    terminate(ValidationError(message), config)


def run(
    config: BootstrapConfig,
    argv: Optional[Sequence[str]] = None,
    *,
    handler: Optional[OptionHandler] = None,
    verbose: bool = False,
    debug: bool = False,
    **kwargs,
) -> BootstrapResult:
    """Script entry-point: configure logging, bootstrap, exit on failure.

    Accepts the keyword arguments of :func:`bootstrap` in ``**kwargs``.
    Never returns when a stage fails.
    """
    setup_logging(verbose=verbose, debug=debug)
    try:
        return bootstrap(config, argv, handler=handler, **kwargs)
    except PreflightError as err:
        log.debug("bootstrap.failed", category=err.category, message=err.message)
        terminate(err, config)


__all__ = ["BootstrapResult", "bootstrap", "error", "run", "terminate", "usage"]
