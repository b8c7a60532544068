"""Shared type aliases for gatewise."""

from .breakages import Breakage, UrlInfo
from .common import BreakageKind, ConditionDescriptor, EvaluationContext, JsonScalar, JsonValue
from .cookies import CookieRecord

__all__ = [
    "Breakage",
    "BreakageKind",
    "ConditionDescriptor",
    "CookieRecord",
    "EvaluationContext",
    "JsonScalar",
    "JsonValue",
    "UrlInfo",
]
