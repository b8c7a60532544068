"""Persistent set of base domains a breakage notice was already reported for."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from gatewise.exceptions import ConfigError
from gatewise.io import load_json_file, write_json_atomic

logger = logging.getLogger(__name__)


class NotifiedDomainStore:
    """JSON-file backed set of notified base domains.

    Without a path the set only lives in memory.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path
        self._domains: set[str] = self._load() if path is not None else set()

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def domains(self) -> tuple[str, ...]:
        return tuple(sorted(self._domains))

    def __contains__(self, domain: object) -> bool:
        return isinstance(domain, str) and domain.lower() in self._domains

    def add(self, domain: str) -> None:
        """Record *domain* and persist the set."""
        normalized = domain.strip().lower()
        if not normalized or normalized in self._domains:
            return
        self._domains.add(normalized)
        self._save()

    def clear(self) -> None:
        self._domains.clear()
        self._save()

    def _load(self) -> set[str]:
        assert self._path is not None
        if not self._path.exists():
            return set()
        try:
            raw = load_json_file(self._path)
        except OSError as exc:
            raise ConfigError(f"Failed to read notified domains file {self._path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in notified domains file {self._path}: {exc}") from exc
        if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
            raise ConfigError(f"Notified domains file {self._path} must contain a list of strings")
        return {item.strip().lower() for item in raw if item.strip()}

    def _save(self) -> None:
        if self._path is None:
            return
        write_json_atomic(path=self._path, payload=sorted(self._domains), temp_prefix=".notified-")
        logger.debug("Saved %d notified domains to %s", len(self._domains), self._path)
