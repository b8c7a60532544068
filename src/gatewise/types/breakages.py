"""Frozen dataclasses for the breakage catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from gatewise.types.common import BreakageKind, JsonValue


@dataclass(frozen=True)
class Breakage:
    """A site breakage entry: which domains it covers and what to report."""

    domains: tuple[str, ...]
    message: JsonValue
    condition: dict[str, Any] | None = None
    kind: BreakageKind = "tab"
    source: str = ""


@dataclass(frozen=True)
class UrlInfo:
    """Host and registrable base domain of a URL."""

    host: str
    base_domain: str
