"""Breakage catalog constants."""

from __future__ import annotations

from gatewise.types.common import BreakageKind

BREAKAGE_KINDS: tuple[BreakageKind, ...] = ("tab", "webrequest")

ALLOWED_BREAKAGE_KEYS: frozenset[str] = frozenset({"domains", "message", "condition"})
REQUIRED_BREAKAGE_KEYS: frozenset[str] = frozenset({"domains", "message"})

BREAKAGE_FILE_SUFFIXES: frozenset[str] = frozenset({".yaml", ".yml", ".json"})

# Two-label public suffixes under which registrable domains take three labels.
SECOND_LEVEL_SUFFIXES: frozenset[str] = frozenset(
    {
        "co.uk",
        "org.uk",
        "ac.uk",
        "gov.uk",
        "com.au",
        "net.au",
        "org.au",
        "co.jp",
        "ne.jp",
        "or.jp",
        "co.nz",
        "co.za",
        "com.br",
        "com.mx",
        "com.cn",
        "com.tr",
        "co.in",
        "co.kr",
    }
)
