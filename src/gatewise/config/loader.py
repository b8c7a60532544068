"""Config loading and normalization for gatewise."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from gatewise.config.model import GatewiseConfig
from gatewise.constants.breakages import BREAKAGE_KINDS
from gatewise.constants.config import ALLOWED_CONFIG_KEYS, CONFIG_FILENAME
from gatewise.exceptions import ConfigError
from gatewise.types.common import BreakageKind


def load_config(root: Path, config_path: Path | None = None) -> GatewiseConfig:
    """Load and validate config from ``gatewise.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return GatewiseConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = set(raw.keys()) - ALLOWED_CONFIG_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {sorted(unknown)}")

    base_dir = path.parent
    return GatewiseConfig(
        breakages=_path_lists_by_kind(raw.get("breakages"), "breakages", base_dir),
        dynamic_breakages=_path_lists_by_kind(raw.get("dynamic_breakages"), "dynamic_breakages", base_dir),
        notified_domains_file=_optional_path(raw.get("notified_domains_file"), "notified_domains_file", base_dir),
        cookies_db=_optional_path(raw.get("cookies_db"), "cookies_db", base_dir),
        cookies_file=_optional_path(raw.get("cookies_file"), "cookies_file", base_dir),
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _resolve(value: str, base_dir: Path) -> Path:
    path = Path(value).expanduser()
    return path if path.is_absolute() else (base_dir / path).resolve()


def _optional_path(value: Any, key_name: str, base_dir: Path) -> Path | None:
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string path")
    return _resolve(value, base_dir)


def _path_lists_by_kind(value: Any, key_name: str, base_dir: Path) -> dict[BreakageKind, tuple[Path, ...]]:
    """Parse a ``{tab: [...], webrequest: [...]}`` mapping of file lists."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{key_name} must be a mapping of breakage kind to file list")

    unknown = set(value.keys()) - set(BREAKAGE_KINDS)
    if unknown:
        raise ConfigError(f"{key_name} has unknown breakage kinds: {sorted(unknown)}")

    resolved: dict[BreakageKind, tuple[Path, ...]] = {}
    for kind in BREAKAGE_KINDS:
        if kind in value:
            entries = _ensure_string_list(value[kind], f"{key_name}.{kind}")
            resolved[kind] = tuple(_resolve(entry, base_dir) for entry in entries if entry.strip())
    return resolved
