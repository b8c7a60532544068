"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, TypeAlias

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]

ConditionDescriptor: TypeAlias = Mapping[str, Any]
EvaluationContext: TypeAlias = Mapping[str, Any]

BreakageKind: TypeAlias = Literal["tab", "webrequest"]
