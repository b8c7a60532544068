"""Condition engine: descriptor trees of and/or/not/url/cookie conditions."""

from __future__ import annotations

from gatewise.conditions.base import Condition
from gatewise.conditions.combinators import AndCondition, NotCondition, OrCondition
from gatewise.conditions.cookie import CookieCondition
from gatewise.conditions.factory import ConditionFactory, run
from gatewise.conditions.registry import ConditionRegistry, default_registry
from gatewise.conditions.url import UrlCondition, compile_pattern
from gatewise.conditions.validation import validate_descriptor

__all__ = [
    "AndCondition",
    "Condition",
    "ConditionFactory",
    "ConditionRegistry",
    "CookieCondition",
    "NotCondition",
    "OrCondition",
    "UrlCondition",
    "compile_pattern",
    "default_registry",
    "run",
    "validate_descriptor",
]
