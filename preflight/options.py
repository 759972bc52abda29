"""Short-option parsing that delegates flag semantics to the caller.

The adapter does not interpret any option itself.  For every recognised
option it calls the caller's *handler* with the option letter and its
argument (``""`` for plain switches).  The handler may return a mapping of
variable bindings – typically ``{"output_dir": arg}`` – which is merged into
the configuration so later stages can check it, or raise
:class:`~preflight.errors.UsageError` to request the usage text.
"""

from __future__ import annotations

import getopt
from typing import Callable, Mapping, Optional, Sequence

import structlog

from .errors import UsageError, ValidationError

log = structlog.get_logger()

OptionHandler = Callable[[str, str], Optional[Mapping[str, str]]]


def parse_options(
    flags: str,
    argv: Sequence[str],
    handler: Optional[OptionHandler],
) -> tuple[dict[str, str], list[str]]:
    """Parse *argv* against the getopt grammar *flags*.

    Args:
        flags: Option letters, a trailing ``:`` marks an option that takes
            an argument.  An empty grammar disables parsing.
        argv: Arguments without the program name.
        handler: Callback invoked once per option, in command-line order.

    Returns:
        ``(bindings, args)`` – the merged variable bindings returned by the
        handler and the remaining positional arguments.

    Raises:
        ValidationError: When a grammar is declared without a handler.
        UsageError: When an option is unknown or lacks its argument, or when
            the handler requests usage.
    """
    if not flags:
        return {}, list(argv)
    if handler is None:
        raise ValidationError(f"Flags '{flags}' declared but no options handler was supplied.")

    # A leading ':' selects silent error reporting in shell getopts; the
    # Python parser always reports through GetoptError.
    grammar = flags.lstrip(":")
    try:
        opts, args = getopt.getopt(list(argv), grammar)
    except getopt.GetoptError as exc:
        log.debug("options.rejected", error=exc.msg, option=exc.opt)
        raise UsageError(exc.msg) from exc

    bindings: dict[str, str] = {}
    for opt, value in opts:
        letter = opt.lstrip("-")
        result = handler(letter, value)
        if result:
            bindings.update({k: str(v) for k, v in result.items()})

    log.debug("options.parsed", options=[o for o, _ in opts], remaining=len(args))
    return bindings, list(args)


__all__ = ["OptionHandler", "parse_options"]
