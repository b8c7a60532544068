"""Configuration-related exceptions."""

from __future__ import annotations

from gatewise.exceptions.base import GatewiseError


class ConfigError(GatewiseError, ValueError):
    """Raised when gatewise configuration or a breakage file is invalid."""
