"""Condition engine exceptions.

Construction problems (``ConditionConfigError`` and subclasses) propagate to
the caller of ``run``. ``PatternError`` and ``CookieStoreError`` are raised by
leaf helpers and absorbed by the leaf conditions, which then evaluate to False.
"""

from __future__ import annotations

from gatewise.exceptions.base import GatewiseError


class ConditionError(GatewiseError):
    """Base class for condition engine errors."""


class ConditionConfigError(ConditionError, ValueError):
    """Raised when a condition descriptor cannot be turned into a condition tree."""


class UnknownConditionTypeError(ConditionConfigError):
    """Raised when a descriptor names a condition type that is not registered."""

    def __init__(self, condition_type: object) -> None:
        super().__init__(f"Unknown condition type: {condition_type!r}")
        self.condition_type = condition_type


class ConditionCycleError(ConditionConfigError):
    """Raised when a descriptor contains itself, directly or transitively."""


class PatternError(ConditionError):
    """Raised when a URL condition pattern is not a valid regular expression."""


class CookieStoreError(ConditionError):
    """Raised by cookie stores when cookies cannot be fetched."""
