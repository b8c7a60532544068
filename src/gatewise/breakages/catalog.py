"""Breakage catalog: base and dynamic breakage lists per kind."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

from gatewise.breakages.loader import load_breakage_file
from gatewise.constants.breakages import BREAKAGE_KINDS
from gatewise.exceptions import ConfigError
from gatewise.types.breakages import Breakage, UrlInfo
from gatewise.types.common import BreakageKind

logger = logging.getLogger(__name__)


def find_breakage(breakages: Iterable[Breakage], info: UrlInfo) -> Breakage | None:
    """Return the first breakage listing the URL's base domain or host."""
    for breakage in breakages:
        if (info.base_domain and info.base_domain in breakage.domains) or (
            info.host and info.host in breakage.domains
        ):
            return breakage
    return None


class BreakageCatalog:
    """Holds base (bundled) and dynamic breakage lists for each kind.

    Base files are required to load; dynamic files are best-effort and an
    unreadable one contributes no entries.
    """

    def __init__(
        self,
        base: Mapping[BreakageKind, Iterable[Breakage]] | None = None,
        dynamic_files: Mapping[BreakageKind, Iterable[Path]] | None = None,
    ) -> None:
        self._base: dict[BreakageKind, list[Breakage]] = {kind: [] for kind in BREAKAGE_KINDS}
        self._dynamic: dict[BreakageKind, list[Breakage]] = {kind: [] for kind in BREAKAGE_KINDS}
        self._dynamic_files: dict[BreakageKind, tuple[Path, ...]] = {kind: () for kind in BREAKAGE_KINDS}

        for kind, entries in (base or {}).items():
            self._check_kind(kind)
            self._base[kind] = list(entries)
        for kind, paths in (dynamic_files or {}).items():
            self._check_kind(kind)
            self._dynamic_files[kind] = tuple(paths)

        self.reload_dynamic()

    @classmethod
    def from_files(
        cls,
        base_files: Mapping[BreakageKind, Iterable[Path]],
        dynamic_files: Mapping[BreakageKind, Iterable[Path]] | None = None,
    ) -> BreakageCatalog:
        """Load base breakage files (errors propagate) and register dynamic ones."""
        base: dict[BreakageKind, list[Breakage]] = {}
        for kind, paths in base_files.items():
            cls._check_kind(kind)
            entries: list[Breakage] = []
            for path in paths:
                entries.extend(load_breakage_file(path, kind))
            base[kind] = entries
        return cls(base=base, dynamic_files=dynamic_files)

    def reload_dynamic(self) -> None:
        """Re-read every dynamic breakage file."""
        for kind, paths in self._dynamic_files.items():
            entries: list[Breakage] = []
            for path in paths:
                try:
                    entries.extend(load_breakage_file(path, kind))
                except ConfigError as exc:
                    logger.warning("Unable to load dynamic %s breakages: %s", kind, exc)
            self._dynamic[kind] = entries

    def breakages(self, kind: BreakageKind) -> list[Breakage]:
        """Base entries followed by dynamic entries for *kind*."""
        self._check_kind(kind)
        return [*self._base[kind], *self._dynamic[kind]]

    def has_breakages(self, kind: BreakageKind) -> bool:
        return bool(self._base[kind] or self._dynamic[kind])

    def find(self, kind: BreakageKind, info: UrlInfo) -> Breakage | None:
        return find_breakage(self.breakages(kind), info)

    @staticmethod
    def _check_kind(kind: str) -> None:
        if kind not in BREAKAGE_KINDS:
            raise ConfigError(f"breakage kind must be one of {list(BREAKAGE_KINDS)}, got {kind!r}")
