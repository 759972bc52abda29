"""Expose the project-wide Click group for the ``preflight-cli`` script.

The module:

* declares a single Click *group* called :pyfunc:`main`;
* wires the global verbosity flags;
* sets up logging via :pyfunc:`preflight.utils.logging.setup_logging`;
* registers the sub-commands located in sibling modules.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import click

from preflight import __version__
from preflight.utils.logging import setup_logging

from .check import cli as check_cmd
from .paths import realpath_cmd, upsearch_cmd

# ─────────────────────────────────────────────────────────────────────────────
# Context settings shared by the entire Click hierarchy
# ─────────────────────────────────────────────────────────────────────────────
_CTX: Dict[str, Any] = dict(
    help_option_names=["-h", "--help"],
    show_default=True,
    max_content_width=120,
)


@click.group(
    context_settings=_CTX,
    help="""\b
preflight-cli – start-up checks for shell scripts.

Typical use inside a script:

\b
  eval "$(preflight-cli check --program "$0" --require-dir out_dir \\
          --var out_dir="$out_dir" --args-type file -- "$@")" || exit 1
""",
)
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="INFO-level diagnostics on stderr.")
@click.option("--debug", is_flag=True, help="DEBUG-level diagnostics on stderr.")
@click.option(
    "--save-logfile",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Mirror diagnostics into this plain-text file.",
)
@click.pass_context
def main(  # noqa: D401
    ctx: click.Context,
    verbose: bool,
    debug: bool,
    save_logfile: Path | None,
) -> None:
    """Root command executed by *preflight-cli*.

    Args:
        ctx: Click runtime context that carries objects across sub-commands.
        verbose: Emit INFO-level diagnostics.
        debug: Emit DEBUG-level diagnostics.
        save_logfile: Optional path for a plain-text copy of the diagnostics.
    """
    setup_logging(verbose=verbose, debug=debug, extra_text_log=save_logfile)
    ctx.obj = {"verbose": verbose, "debug": debug}


main.add_command(check_cmd)
main.add_command(upsearch_cmd)
main.add_command(realpath_cmd)

cli = main
__all__: list[str] = ["main"]
