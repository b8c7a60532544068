"""Stable validation error codes for descriptor and breakage validation."""

from __future__ import annotations

COND000: str = "COND000"  # condition file not found / unreadable / invalid syntax
COND001: str = "COND001"  # descriptor node is not a mapping
COND002: str = "COND002"  # missing or unknown condition type
COND003: str = "COND003"  # unknown key for condition type
COND004: str = "COND004"  # missing required field
COND005: str = "COND005"  # invalid value type
COND006: str = "COND006"  # invalid regular expression
COND007: str = "COND007"  # descriptor cycle

BRK001: str = "BRK001"  # breakage file not found / unreadable
BRK002: str = "BRK002"  # invalid YAML/JSON parse
BRK003: str = "BRK003"  # top-level value is not a list
BRK004: str = "BRK004"  # breakage entry is not a mapping
BRK005: str = "BRK005"  # unknown breakage key
BRK006: str = "BRK006"  # missing or invalid domains
BRK007: str = "BRK007"  # missing message

ALL_COND_CODES: tuple[str, ...] = (COND000, COND001, COND002, COND003, COND004, COND005, COND006, COND007)
ALL_BRK_CODES: tuple[str, ...] = (BRK001, BRK002, BRK003, BRK004, BRK005, BRK006, BRK007)
