"""Boolean combinators: and, or, not."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from gatewise.conditions.base import Condition
from gatewise.exceptions import ConditionConfigError

if TYPE_CHECKING:
    from gatewise.conditions.factory import ConditionFactory
    from gatewise.types.common import ConditionDescriptor


class _GroupCondition(Condition):
    """Shared construction for conditions over an ordered list of children."""

    def __init__(self, factory: ConditionFactory, desc: ConditionDescriptor) -> None:
        super().__init__(factory, desc)
        raw_children = desc.get("conditions")
        if raw_children is None:
            raw_children = []
        if not isinstance(raw_children, (list, tuple)):
            raise ConditionConfigError(f"'{desc.get('type')}' condition expects a list under 'conditions'")
        self._conditions: list[Condition] = [factory.create(child) for child in raw_children]

    @property
    def conditions(self) -> tuple[Condition, ...]:
        return tuple(self._conditions)

    async def initialize(self) -> None:
        await asyncio.gather(*(condition.initialize() for condition in self._conditions))


class AndCondition(_GroupCondition):
    """True when every child is true. Empty groups are true."""

    def evaluate(self) -> bool:
        return all(condition.evaluate() for condition in self._conditions)


class OrCondition(_GroupCondition):
    """True when any child is true. Empty groups are false."""

    def evaluate(self) -> bool:
        return any(condition.evaluate() for condition in self._conditions)


class NotCondition(Condition):
    """Negates its child; true when no child is configured."""

    def __init__(self, factory: ConditionFactory, desc: ConditionDescriptor) -> None:
        super().__init__(factory, desc)
        child = desc.get("condition")
        self._condition: Condition | None = factory.create(child) if child is not None else None

    @property
    def condition(self) -> Condition | None:
        return self._condition

    async def initialize(self) -> None:
        if self._condition is not None:
            await self._condition.initialize()

    def evaluate(self) -> bool:
        if self._condition is None:
            return True
        return not self._condition.evaluate()
