"""In-memory cookie store, optionally loaded from a YAML/JSON cookie list."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from gatewise.cookies.base import cookie_matches_domain
from gatewise.exceptions import ConfigError
from gatewise.types.cookies import CookieRecord


class InMemoryCookieStore:
    """Cookie store over a fixed list of records."""

    def __init__(self, records: Iterable[CookieRecord] = ()) -> None:
        self._records: list[CookieRecord] = list(records)

    @property
    def records(self) -> tuple[CookieRecord, ...]:
        return tuple(self._records)

    def add(self, record: CookieRecord) -> None:
        self._records.append(record)

    async def get_all(self, domain: str) -> list[CookieRecord]:
        return [record for record in self._records if cookie_matches_domain(record.domain, domain)]

    @classmethod
    def from_file(cls, path: Path) -> InMemoryCookieStore:
        """Load cookies from a YAML or JSON list of ``{name, value, domain, path}`` mappings."""
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Failed to read cookie file {path}: {exc}") from exc

        try:
            raw = json.loads(text) if path.suffix.lower() == ".json" else yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise ConfigError(f"Invalid cookie file {path}: {exc}") from exc

        if raw is None:
            raw = []
        if not isinstance(raw, list):
            raise ConfigError(f"Cookie file {path} must contain a list of cookies")

        return cls(_record_from_raw(item, path, index) for index, item in enumerate(raw))


def _record_from_raw(item: Any, path: Path, index: int) -> CookieRecord:
    if not isinstance(item, dict):
        raise ConfigError(f"{path}: cookie #{index} must be a mapping")
    for key in ("name", "value", "domain"):
        if not isinstance(item.get(key), str):
            raise ConfigError(f"{path}: cookie #{index} requires string '{key}'")
    cookie_path = item.get("path", "/")
    if not isinstance(cookie_path, str):
        raise ConfigError(f"{path}: cookie #{index} 'path' must be a string")
    return CookieRecord(name=item["name"], value=item["value"], domain=item["domain"], path=cookie_path)
