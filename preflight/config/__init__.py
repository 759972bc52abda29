"""
Configuration package façade.

* :func:`load_config` – merge keyword overrides, ``PREFLIGHT_*`` environment
  variables and an optional YAML document into a :class:`BootstrapConfig`.
* :class:`BootstrapConfig` – the frozen Pydantic model every stage receives.
"""

from .loader import load_config  # noqa: F401
from .schema import SLOTS, BootstrapConfig  # noqa: F401

__all__: list[str] = ["load_config", "BootstrapConfig", "SLOTS"]
