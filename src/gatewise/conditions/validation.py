"""Collect-all validation for condition descriptors.

Returns a list of :class:`ValidationError` instances rather than raising,
so callers can report every problem in one pass. ``run`` itself does not
call this; it only rejects unknown types and cycles.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from gatewise.conditions.registry import ConditionRegistry, default_registry
from gatewise.conditions.url import compile_pattern
from gatewise.constants.conditions import ALLOWED_KEYS, REQUIRED_KEYS, ConditionType
from gatewise.constants.validation import COND001, COND002, COND003, COND004, COND005, COND006, COND007
from gatewise.exceptions import PatternError
from gatewise.exceptions.validation import ValidationError


def validate_descriptor(
    desc: Any,
    path: str = "<descriptor>",
    *,
    registry: ConditionRegistry | None = None,
) -> list[ValidationError]:
    """Validate a descriptor tree and return all errors found."""
    errors: list[ValidationError] = []
    _validate_node(desc, path, "condition", errors, registry or default_registry(), [])
    return errors


def _validate_node(
    desc: Any,
    path: str,
    field: str,
    errors: list[ValidationError],
    registry: ConditionRegistry,
    ancestors: list[int],
) -> None:
    if not isinstance(desc, Mapping):
        errors.append(
            ValidationError(
                code=COND001,
                path=path,
                field=field,
                message=f"condition must be a mapping, got {type(desc).__name__}",
            )
        )
        return

    if id(desc) in ancestors:
        errors.append(
            ValidationError(
                code=COND007,
                path=path,
                field=field,
                message="condition contains itself",
                hint="remove the YAML alias that points back to an enclosing condition",
            )
        )
        return

    condition_type = desc.get("type")
    if condition_type not in registry:
        errors.append(
            ValidationError(
                code=COND002,
                path=path,
                field=f"{field}.type",
                message=f"unknown condition type {condition_type!r}",
                hint=f"expected one of {', '.join(registry.types)}",
            )
        )
        return

    allowed = ALLOWED_KEYS.get(condition_type)
    if allowed is not None:
        unknown = sorted(str(key) for key in set(desc.keys()) - allowed)
        for key in unknown:
            errors.append(
                ValidationError(
                    code=COND003,
                    path=path,
                    field=f"{field}.{key}",
                    message=f"unknown key for '{condition_type}' condition",
                    hint=f"allowed keys: {', '.join(sorted(allowed))}",
                )
            )

    for key in sorted(REQUIRED_KEYS.get(condition_type, frozenset())):
        if not desc.get(key):
            errors.append(
                ValidationError(
                    code=COND004,
                    path=path,
                    field=f"{field}.{key}",
                    message=f"'{condition_type}' condition requires '{key}'",
                )
            )

    ancestors.append(id(desc))
    try:
        _validate_fields(desc, condition_type, path, field, errors, registry, ancestors)
    finally:
        ancestors.pop()


def _validate_fields(
    desc: Mapping[str, Any],
    condition_type: str,
    path: str,
    field: str,
    errors: list[ValidationError],
    registry: ConditionRegistry,
    ancestors: list[int],
) -> None:
    if condition_type in (ConditionType.AND, ConditionType.OR):
        children = desc.get("conditions", [])
        if not isinstance(children, list):
            errors.append(_type_error(path, f"{field}.conditions", "a list of conditions", children))
            return
        for index, child in enumerate(children):
            _validate_node(child, path, f"{field}.conditions[{index}]", errors, registry, ancestors)

    elif condition_type == ConditionType.NOT:
        if desc.get("condition") is not None:
            _validate_node(desc["condition"], path, f"{field}.condition", errors, registry, ancestors)

    elif condition_type == ConditionType.URL:
        pattern = desc.get("pattern")
        if pattern is None:
            return
        if not isinstance(pattern, str):
            errors.append(_type_error(path, f"{field}.pattern", "a string", pattern))
            return
        try:
            compile_pattern(pattern)
        except PatternError as exc:
            errors.append(
                ValidationError(code=COND006, path=path, field=f"{field}.pattern", message=str(exc))
            )

    elif condition_type == ConditionType.COOKIE:
        for key in ("domain", "name", "value", "value_contain"):
            value = desc.get(key)
            if value is not None and not isinstance(value, str):
                errors.append(_type_error(path, f"{field}.{key}", "a string", value))


def _type_error(path: str, field: str, expected: str, value: Any) -> ValidationError:
    return ValidationError(
        code=COND005,
        path=path,
        field=field,
        message=f"expected {expected}, got {type(value).__name__}",
    )
