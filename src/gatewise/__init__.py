"""gatewise package."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from gatewise.conditions import ConditionFactory, ConditionRegistry, default_registry, run

__all__ = ["ConditionFactory", "ConditionRegistry", "__version__", "default_registry", "run"]

try:
    __version__ = version("gatewise")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
