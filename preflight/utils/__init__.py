"""
Public façade for the *utils* package.

Anything imported here becomes part of the *stable* public API.
"""

from __future__ import annotations

from .logging import setup_logging
from .paths import realpath, upsearch

__all__: list[str] = ["realpath", "setup_logging", "upsearch"]
