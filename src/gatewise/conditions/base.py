"""Base class for condition nodes.

A node is built by a :class:`~gatewise.conditions.factory.ConditionFactory`,
primed once with :meth:`Condition.initialize`, then evaluated synchronously.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from gatewise.conditions.factory import ConditionFactory
    from gatewise.types.common import ConditionDescriptor


class Condition(ABC):
    """One node of a condition tree."""

    def __init__(self, factory: ConditionFactory, desc: ConditionDescriptor) -> None:
        self._factory = factory
        self._desc = desc

    @property
    def factory(self) -> ConditionFactory:
        """Session that owns this node."""
        return self._factory

    @property
    def desc(self) -> ConditionDescriptor:
        """Descriptor this node was built from."""
        return self._desc

    def field(self, key: str, default: Any = None) -> Any:
        """Return a descriptor field, or *default* when absent."""
        return self._desc.get(key, default)

    async def initialize(self) -> None:
        """Fetch external data needed by :meth:`evaluate`. No-op by default."""

    @abstractmethod
    def evaluate(self) -> bool:
        """Return whether the condition holds for the session context."""
