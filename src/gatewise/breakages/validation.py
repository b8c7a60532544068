"""Collect-all validation for breakage files."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from gatewise.breakages.loader import read_breakage_document
from gatewise.conditions.registry import ConditionRegistry
from gatewise.conditions.validation import validate_descriptor
from gatewise.constants.breakages import ALLOWED_BREAKAGE_KEYS, BREAKAGE_FILE_SUFFIXES
from gatewise.constants.validation import BRK001, BRK002, BRK003, BRK004, BRK005, BRK006, BRK007
from gatewise.exceptions import ConfigError
from gatewise.exceptions.validation import ValidationError


def validate_breakage_file(path: Path, *, registry: ConditionRegistry | None = None) -> list[ValidationError]:
    """Validate one breakage file, including every embedded condition."""
    path_str = str(path)
    if not path.is_file():
        return [ValidationError(code=BRK001, path=path_str, field="", message=f"breakage file not found: {path}")]
    if path.suffix.lower() not in BREAKAGE_FILE_SUFFIXES:
        return [
            ValidationError(
                code=BRK001,
                path=path_str,
                field="",
                message=f"unsupported breakage file extension: {path.name}",
                hint=f"use one of {', '.join(sorted(BREAKAGE_FILE_SUFFIXES))}",
            )
        ]

    try:
        raw = read_breakage_document(path)
    except ConfigError as exc:
        return [ValidationError(code=BRK002, path=path_str, field="", message=str(exc))]

    if raw is None:
        return []
    if not isinstance(raw, list):
        return [ValidationError(code=BRK003, path=path_str, field="", message="breakage file must contain a list")]

    errors: list[ValidationError] = []
    for index, item in enumerate(raw):
        field = f"[{index}]"
        if not isinstance(item, Mapping):
            errors.append(ValidationError(code=BRK004, path=path_str, field=field, message="breakage must be a mapping"))
            continue

        for key in sorted(str(k) for k in set(item.keys()) - ALLOWED_BREAKAGE_KEYS):
            errors.append(
                ValidationError(
                    code=BRK005,
                    path=path_str,
                    field=f"{field}.{key}",
                    message="unknown breakage key",
                    hint=f"allowed keys: {', '.join(sorted(ALLOWED_BREAKAGE_KEYS))}",
                )
            )

        domains = item.get("domains")
        if not isinstance(domains, list) or not domains or not all(isinstance(d, str) and d.strip() for d in domains):
            errors.append(
                ValidationError(
                    code=BRK006,
                    path=path_str,
                    field=f"{field}.domains",
                    message="'domains' must be a non-empty list of strings",
                )
            )

        if "message" not in item:
            errors.append(
                ValidationError(code=BRK007, path=path_str, field=f"{field}.message", message="missing 'message'")
            )

        if item.get("condition") is not None:
            condition_errors = validate_descriptor(item["condition"], path_str, registry=registry)
            errors.extend(_prefixed(condition_errors, field))

    return errors


def _prefixed(errors: list[ValidationError], prefix: str) -> list[ValidationError]:
    return [
        ValidationError(code=e.code, path=e.path, field=f"{prefix}.{e.field}", message=e.message, hint=e.hint)
        for e in errors
    ]
