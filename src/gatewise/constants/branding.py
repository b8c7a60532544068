"""CLI text."""

from __future__ import annotations

CLI_DESCRIPTION: str = (
    "Evaluate declarative URL/cookie conditions and match site breakage lists.\n\n"
    "Commands:\n"
    "  check     evaluate a condition file against a URL\n"
    "  match     find the breakage that applies to a URL\n"
    "  validate  validate condition or breakage files"
)
