"""Shared pytest fixtures for gatewise tests."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import pytest
import yaml

from gatewise.conditions.base import Condition
from gatewise.conditions.registry import ConditionRegistry, default_registry
from gatewise.types.cookies import CookieRecord


@pytest.fixture(scope="session")
def schemas_root() -> Path:
    """Return the directory holding published JSON Schemas."""
    return Path(__file__).resolve().parents[1] / "schemas"


@pytest.fixture
def cookie_store() -> Callable[..., AsyncMock]:
    """Return a builder for cookie store stubs keyed by domain."""

    def _build(cookies_by_domain: dict[str, list[CookieRecord]] | None = None, *, error: Exception | None = None):
        store = AsyncMock()

        async def _get_all(domain: str) -> list[CookieRecord]:
            await asyncio.sleep(0)
            if error is not None:
                raise error
            return list((cookies_by_domain or {}).get(domain, []))

        store.get_all.side_effect = _get_all
        return store

    return _build


@pytest.fixture
def counting_registry() -> tuple[ConditionRegistry, list[str]]:
    """Default registry plus a ``probe`` condition that records each evaluation.

    A probe descriptor looks like ``{"type": "probe", "label": "x", "result": False}``.
    """
    calls: list[str] = []

    class ProbeCondition(Condition):
        def evaluate(self) -> bool:
            calls.append(self.field("label", ""))
            return bool(self.field("result", True))

    registry = default_registry()
    registry.register("probe", ProbeCondition)
    return registry, calls


def write_yaml(path: Path, payload: Any) -> Path:
    """Dump *payload* as YAML into *path*."""
    path.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")
    return path
