"""Required directories and files referenced by variable name.

The caller declares *names* (``require_dirs=["output_dir"]``) rather than
paths.  A name whose value is empty means a flag was never supplied and is
reported with the usage text; a supplied value that does not exist on disk is
a validation error.  The presence pass covers every name before any
filesystem check runs.
"""

from __future__ import annotations

import structlog

from .checks import ResourceKind, require
from .config.schema import BootstrapConfig
from .errors import UsageError

log = structlog.get_logger()

REQUIRED_LABEL = "Required"


def check_presence(config: BootstrapConfig) -> None:
    """Raise :class:`UsageError` at the first required name left unset."""
    for name in (*config.require_dirs, *config.require_files):
        if not config.lookup(name):
            log.info("prerequisites.missing", name=name)
            raise UsageError()


def check_prerequisites(config: BootstrapConfig) -> None:
    """Run the presence pass, then the existence pass.

    Directories are checked before files, each list in declaration order.

    Raises:
        UsageError: When a required variable is unset.
        ValidationError: When a supplied path fails its existence check.
    """
    check_presence(config)
    for name in config.require_dirs:
        require(ResourceKind.DIRECTORY, config.lookup(name), REQUIRED_LABEL)
    for name in config.require_files:
        require(ResourceKind.FILE, config.lookup(name), REQUIRED_LABEL)


__all__ = ["REQUIRED_LABEL", "check_prerequisites", "check_presence"]
