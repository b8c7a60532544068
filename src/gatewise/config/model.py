"""Config data model for gatewise."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from gatewise.types.common import BreakageKind


@dataclass(frozen=True)
class GatewiseConfig:
    """Resolved gatewise config. All paths are absolute."""

    breakages: dict[BreakageKind, tuple[Path, ...]] = field(default_factory=dict)
    dynamic_breakages: dict[BreakageKind, tuple[Path, ...]] = field(default_factory=dict)
    notified_domains_file: Path | None = None
    cookies_db: Path | None = None
    cookies_file: Path | None = None

    @property
    def has_cookie_source(self) -> bool:
        """Whether a cookie database or cookie file is configured."""
        return self.cookies_db is not None or self.cookies_file is not None
