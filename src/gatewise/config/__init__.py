"""Configuration loading for gatewise."""

from __future__ import annotations

from gatewise.config.loader import load_config
from gatewise.config.model import GatewiseConfig

__all__ = ["GatewiseConfig", "load_config"]
