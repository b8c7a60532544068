"""Shared exception hierarchy for gatewise."""

from __future__ import annotations

from .base import GatewiseError
from .conditions import (
    ConditionConfigError,
    ConditionCycleError,
    ConditionError,
    CookieStoreError,
    PatternError,
    UnknownConditionTypeError,
)
from .config import ConfigError

__all__ = [
    "ConditionConfigError",
    "ConditionCycleError",
    "ConditionError",
    "ConfigError",
    "CookieStoreError",
    "GatewiseError",
    "PatternError",
    "UnknownConditionTypeError",
]
