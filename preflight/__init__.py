"""
preflight package initialisation.

The module performs two small tasks:

1. **Expose the version string**
   ``preflight.__version__`` is resolved from the installed distribution
   metadata so every runtime context surfaces the same value.

2. **Re-export the script-facing API**
   Calling scripts normally need only::

       from preflight import BootstrapConfig, run

       result = run(BootstrapConfig(require_dirs="output_dir", ...), handler=options)

Module attributes
-----------------
__version__ : str
    Semantic version derived from the installed wheel.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version("preflight-bootstrap")
except PackageNotFoundError:
    # Source tree without an installed wheel.
    __version__ = "0.0.0"

from .driver import BootstrapResult, bootstrap, error, run, usage  # noqa: E402
from .checks import ResourceKind, require  # noqa: E402
from .config import BootstrapConfig, load_config  # noqa: E402
from .errors import PreflightError, UsageError, ValidationError  # noqa: E402

__all__: list[str] = [
    "__version__",
    "BootstrapConfig",
    "BootstrapResult",
    "PreflightError",
    "ResourceKind",
    "UsageError",
    "ValidationError",
    "bootstrap",
    "error",
    "load_config",
    "require",
    "run",
    "usage",
]
