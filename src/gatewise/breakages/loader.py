"""Load breakage lists from YAML or JSON files."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from gatewise.constants.breakages import ALLOWED_BREAKAGE_KEYS, BREAKAGE_KINDS, REQUIRED_BREAKAGE_KEYS
from gatewise.exceptions import ConfigError
from gatewise.types.breakages import Breakage
from gatewise.types.common import BreakageKind

logger = logging.getLogger(__name__)


def read_breakage_document(path: Path) -> Any:
    """Read and parse a breakage file, raising ConfigError on I/O or syntax errors."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read breakage file {path}: {exc}") from exc

    try:
        if path.suffix.lower() == ".json":
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Invalid breakage file {path}: {exc}") from exc


def load_breakage_file(path: Path, kind: BreakageKind = "tab") -> list[Breakage]:
    """Load the breakage list stored in *path*."""
    if kind not in BREAKAGE_KINDS:
        raise ConfigError(f"breakage kind must be one of {list(BREAKAGE_KINDS)}, got {kind!r}")

    raw = read_breakage_document(path)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ConfigError(f"Breakage file {path} must contain a list")

    breakages = [parse_breakage(item, kind=kind, source=str(path), index=index) for index, item in enumerate(raw)]
    logger.debug("Loaded %d %s breakages from %s", len(breakages), kind, path)
    return breakages


def parse_breakage(item: Any, *, kind: BreakageKind, source: str, index: int) -> Breakage:
    """Build a Breakage from one raw list entry."""
    if not isinstance(item, Mapping):
        raise ConfigError(f"{source}: breakage #{index} must be a mapping")

    unknown = set(item.keys()) - ALLOWED_BREAKAGE_KEYS
    if unknown:
        raise ConfigError(f"{source}: breakage #{index} has unknown keys: {sorted(unknown)}")

    missing = REQUIRED_BREAKAGE_KEYS - set(item.keys())
    if missing:
        names = ", ".join(repr(key) for key in sorted(missing))
        raise ConfigError(f"{source}: breakage #{index} is missing {names}")

    domains = item.get("domains")
    if not isinstance(domains, list) or not all(isinstance(domain, str) for domain in domains):
        raise ConfigError(f"{source}: breakage #{index} 'domains' must be a list of strings")

    condition = item.get("condition")
    if condition is not None and not isinstance(condition, Mapping):
        raise ConfigError(f"{source}: breakage #{index} 'condition' must be a mapping")

    return Breakage(
        domains=tuple(domain.strip().lower() for domain in domains if domain.strip()),
        message=item["message"],
        condition=dict(condition) if condition is not None else None,
        kind=kind,
        source=source,
    )
