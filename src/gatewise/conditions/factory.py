"""Condition factory: builds condition trees and owns one evaluation session.

A factory lives for a single :func:`run` call. It holds the evaluation
context, the cookie store, and a small cache that leaf conditions use so
that two leaves needing the same external data trigger one fetch.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from gatewise.conditions.base import Condition
from gatewise.conditions.registry import ConditionRegistry, default_registry
from gatewise.cookies.base import CookieStore
from gatewise.exceptions import ConditionConfigError, ConditionCycleError, UnknownConditionTypeError
from gatewise.types.common import ConditionDescriptor, EvaluationContext

logger = logging.getLogger(__name__)


class ConditionFactory:
    """Per-evaluation session: context, registry, cookie store, data cache."""

    def __init__(
        self,
        context: EvaluationContext | None = None,
        *,
        cookie_store: CookieStore | None = None,
        registry: ConditionRegistry | None = None,
    ) -> None:
        self._context: EvaluationContext = context if context is not None else {}
        self._cookie_store = cookie_store
        self._registry = registry if registry is not None else default_registry()
        self._storage: dict[str, Any] = {}
        self._pending: dict[str, asyncio.Task[Any]] = {}
        self._building: list[int] = []

    @property
    def context(self) -> EvaluationContext:
        return self._context

    @property
    def cookie_store(self) -> CookieStore | None:
        return self._cookie_store

    @property
    def registry(self) -> ConditionRegistry:
        return self._registry

    def create(self, desc: ConditionDescriptor) -> Condition:
        """Build the condition tree for *desc*.

        Raises UnknownConditionTypeError for unregistered types and
        ConditionCycleError when *desc* contains itself.
        """
        if not isinstance(desc, Mapping):
            raise ConditionConfigError(f"condition descriptor must be a mapping, got {type(desc).__name__}")
        if "type" not in desc:
            raise UnknownConditionTypeError(None)

        marker = id(desc)
        if marker in self._building:
            raise ConditionCycleError(f"condition descriptor of type '{desc['type']}' contains itself")

        cls = self._registry.get(desc["type"])
        self._building.append(marker)
        try:
            return cls(self, desc)
        finally:
            self._building.pop()

    def store_data(self, key: str, value: Any) -> None:
        self._storage[key] = value

    def retrieve_data(self, key: str) -> Any:
        return self._storage.get(key)

    async def load_once(self, key: str, loader: Callable[[], Awaitable[Any]]) -> Any:
        """Return cached data for *key*, running *loader* at most once per session.

        Concurrent callers for the same key wait on the same load.
        """
        if key in self._storage:
            return self._storage[key]
        task = self._pending.get(key)
        if task is None:
            task = asyncio.ensure_future(loader())
            self._pending[key] = task
        try:
            value = await task
        finally:
            self._pending.pop(key, None)
        self.store_data(key, value)
        return value


async def run(
    desc: ConditionDescriptor | None,
    context: EvaluationContext | None = None,
    *,
    cookie_store: CookieStore | None = None,
    registry: ConditionRegistry | None = None,
) -> bool:
    """Evaluate *desc* against *context*. A missing descriptor always passes."""
    if desc is None:
        return True

    factory = ConditionFactory(context, cookie_store=cookie_store, registry=registry)
    condition = factory.create(desc)
    await condition.initialize()
    result = condition.evaluate()
    logger.debug("Condition '%s' evaluated to %s", desc.get("type"), result)
    return result
