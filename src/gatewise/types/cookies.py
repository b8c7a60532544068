"""Cookie records handed to cookie conditions by cookie stores."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CookieRecord:
    """A single cookie as seen by condition evaluation."""

    name: str
    value: str
    domain: str = ""
    path: str = "/"
