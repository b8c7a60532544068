"""Registry mapping condition type names to condition classes.

Registries are plain objects built at startup and handed to the factory;
there is no module-level table to mutate.
"""

from __future__ import annotations

from collections.abc import Iterator

from gatewise.conditions.base import Condition
from gatewise.conditions.combinators import AndCondition, NotCondition, OrCondition
from gatewise.conditions.cookie import CookieCondition
from gatewise.conditions.url import UrlCondition
from gatewise.constants.conditions import ConditionType
from gatewise.exceptions import ConditionConfigError, UnknownConditionTypeError


class ConditionRegistry:
    """Type name -> condition class mapping used by ConditionFactory."""

    def __init__(self, entries: dict[str, type[Condition]] | None = None) -> None:
        self._entries: dict[str, type[Condition]] = {}
        for type_name, cls in (entries or {}).items():
            self.register(type_name, cls)

    def register(self, type_name: str, cls: type[Condition]) -> None:
        """Register *cls* for *type_name*. Re-registering a name is an error."""
        if not isinstance(type_name, str) or not type_name:
            raise ConditionConfigError("condition type name must be a non-empty string")
        if type_name in self._entries:
            raise ConditionConfigError(f"condition type '{type_name}' is already registered")
        self._entries[str(type_name)] = cls

    def get(self, type_name: object) -> type[Condition]:
        """Return the class registered for *type_name*."""
        if not isinstance(type_name, str) or type_name not in self._entries:
            raise UnknownConditionTypeError(type_name)
        return self._entries[type_name]

    def __contains__(self, type_name: object) -> bool:
        return isinstance(type_name, str) and type_name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._entries))

    @property
    def types(self) -> tuple[str, ...]:
        """Sorted registered type names."""
        return tuple(sorted(self._entries))


def default_registry() -> ConditionRegistry:
    """Return a fresh registry holding the built-in condition types."""
    return ConditionRegistry(
        {
            ConditionType.AND: AndCondition,
            ConditionType.OR: OrCondition,
            ConditionType.NOT: NotCondition,
            ConditionType.URL: UrlCondition,
            ConditionType.COOKIE: CookieCondition,
        }
    )
