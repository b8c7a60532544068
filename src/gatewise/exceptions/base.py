"""Root exception type for gatewise."""

from __future__ import annotations


class GatewiseError(Exception):
    """Base class for all gatewise errors."""
