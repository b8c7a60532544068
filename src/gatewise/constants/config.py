"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "gatewise.yaml"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "breakages",
        "dynamic_breakages",
        "notified_domains_file",
        "cookies_db",
        "cookies_file",
    }
)
