"""``upsearch`` and ``realpath`` helpers exposed on the command line."""

from __future__ import annotations

from pathlib import Path

import click

from ..utils.paths import realpath, upsearch


@click.command(
    name="upsearch",
    context_settings=dict(help_option_names=["-h", "--help"], max_content_width=120),
    help="Print NAME joined to the nearest ancestor directory that contains it.",
)
@click.argument("name")
@click.option(
    "--start",
    type=click.Path(exists=True, path_type=Path),
    help="Directory to start from (default: working directory).",
)
def upsearch_cmd(name: str, start: Path | None) -> None:
    """Exit 1 without output when no ancestor contains *name*."""
    found = upsearch(name, start)
    if found is None:
        raise click.exceptions.Exit(1)
    click.echo(found)


@click.command(
    name="realpath",
    context_settings=dict(help_option_names=["-h", "--help"], max_content_width=120),
    help="Print PATH made absolute against the working directory.",
)
@click.argument("path")
def realpath_cmd(path: str) -> None:
    click.echo(realpath(path))


__all__ = ["realpath_cmd", "upsearch_cmd"]
