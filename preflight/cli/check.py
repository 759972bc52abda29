"""
Run the bootstrap on behalf of a shell script.

Invoked as ``preflight-cli check``.  Options (and/or a YAML document given
with ``--config``) describe what the script requires; positional arguments
after ``--`` are the script's own arguments.

On success the resolved values are printed as shell-quoted assignments so a
script can ``eval`` them::

    resources_dir=/home/me/scripts
    resource1=/home/me/scripts/hosts.conf
    current_date=20240131
    args=(a.txt b.txt)

Failures print the usage or error text on stdout and exit with ``0`` (usage)
or ``1`` (validation), so scripts should only ``eval`` the output when it
succeeded *and* did not print usage; ``--log-target`` reports the log file
path instead of redirecting, because the CLI must keep its own stdout.

Key flags
---------
* ``--require-dir`` / ``--require-file`` – variable names, repeatable
* ``--var NAME=VALUE``                   – bind a variable, repeatable
* ``--resource``                         – file under the storage root
* ``--args-type``                        – ``file`` or ``directory``
"""

from __future__ import annotations

import re
import shlex
from pathlib import Path
from typing import Dict, Optional, Tuple

import click
import structlog

from ..driver import BootstrapResult, bootstrap
from ..config import load_config
from ..errors import PreflightError
from ..usage import echo_error

log = structlog.get_logger()

_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _parse_vars(pairs: Tuple[str, ...]) -> Dict[str, str]:
    """Turn ``NAME=VALUE`` strings into a mapping."""
    out: Dict[str, str] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not _NAME_RE.match(name):
            raise click.BadParameter(f"expected NAME=VALUE, got {pair!r}", param_hint="--var")
        out[name] = value
    return out


def format_bindings(result: BootstrapResult) -> str:
    """Return ``name=value`` lines followed by an ``args=(…)`` array."""
    lines = [
        f"{name}={shlex.quote(value)}"
        for name, value in result.variables.items()
        if _NAME_RE.match(name)
    ]
    lines.append("args=(" + " ".join(shlex.quote(a) for a in result.args) + ")")
    return "\n".join(lines)


@click.command(
    name="check",
    context_settings=dict(help_option_names=["-h", "--help"], show_default=True, max_content_width=120),
    help="Validate a script's preconditions and print the resolved values.",
)
@click.argument("args", nargs=-1)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="YAML document using the preflight vocabulary.",
)
@click.option("--program", help="Name shown in usage text and used for the log file.")
@click.option("--resources-dir", type=click.Path(path_type=Path), help="Storage root override.")
@click.option("--log-dir", type=click.Path(path_type=Path), help="Log directory override.")
@click.option("--temp-dir", type=click.Path(path_type=Path), help="Temporary directory override.")
@click.option("--usage-text", help="Help text shown after the program name.")
@click.option("--require-root", is_flag=True, help="Fail unless running as root.")
@click.option("--log-target", is_flag=True, help="Create the log file and report it as log_file.")
@click.option("--require-dir", "require_dirs", multiple=True, help="Variable naming a required directory (repeatable).")
@click.option("--require-file", "require_files", multiple=True, help="Variable naming a required file (repeatable).")
@click.option("--args-type", help="Kind of the positional arguments: file or directory.")
@click.option("--resource", "resources", multiple=True, help="File under the storage root (repeatable).")
@click.option("--var", "variables", multiple=True, metavar="NAME=VALUE", help="Bind a variable (repeatable).")
@click.pass_context
def cli(  # noqa: D401
    ctx: click.Context,
    args: Tuple[str, ...],
    config_path: Optional[Path],
    program: Optional[str],
    resources_dir: Optional[Path],
    log_dir: Optional[Path],
    temp_dir: Optional[Path],
    usage_text: Optional[str],
    require_root: bool,
    log_target: bool,
    require_dirs: Tuple[str, ...],
    require_files: Tuple[str, ...],
    args_type: Optional[str],
    resources: Tuple[str, ...],
    variables: Tuple[str, ...],
) -> None:
    """Entry-point for ``preflight-cli check``.

    Args:
        ctx: Click context used to set the exit status.
        args: The calling script's positional arguments.
        config_path: Optional YAML document.
        program: Invocation name of the calling script.
        resources_dir: Storage root override.
        log_dir: Log directory override.
        temp_dir: Temporary directory override.
        usage_text: Help text for usage output.
        require_root: Enable the privilege gate.
        log_target: Create the log file for this run.
        require_dirs: Variable names that must hold directories.
        require_files: Variable names that must hold files.
        args_type: Required kind of positional arguments.
        resources: Filenames below the storage root.
        variables: ``NAME=VALUE`` bindings.
    """
    bindings = _parse_vars(variables)
    overrides = dict(
        program=program,
        resources_dir=resources_dir,
        log_dir=log_dir,
        temp_dir=temp_dir,
        usage_text=usage_text,
        require_root=True if require_root else None,
        enable_log=True if log_target else None,
        require_dirs=list(require_dirs) or None,
        require_files=list(require_files) or None,
        args_type=args_type,
        resources=list(resources) or None,
    )

    shown_program = program or "script"
    shown_usage = usage_text or ""
    try:
        config = load_config(config_path, **overrides).with_variables(bindings)
        shown_program, shown_usage = config.program, config.usage_text
        result = bootstrap(config, list(args), redirect=False)
    except PreflightError as err:
        log.debug("check.failed", category=err.category, message=err.message)
        echo_error(err, program=shown_program, usage_text=shown_usage)
        ctx.exit(err.exit_code)

    click.echo(format_bindings(result))


__all__ = ["cli", "format_bindings"]
