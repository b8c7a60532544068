"""Read condition descriptors from YAML or JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from gatewise.exceptions import ConfigError


def load_condition_file(path: Path) -> dict[str, Any] | None:
    """Return the descriptor stored in *path*; an empty file yields None."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read condition file {path}: {exc}") from exc

    try:
        raw = json.loads(text) if path.suffix.lower() == ".json" else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Invalid condition file {path}: {exc}") from exc

    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ConfigError(f"Condition file {path} must contain a mapping")
    return raw
