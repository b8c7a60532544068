"""Condition type names and descriptor field sets."""

from __future__ import annotations

from enum import StrEnum


class ConditionType(StrEnum):
    """Built-in condition type tags."""

    AND = "and"
    OR = "or"
    NOT = "not"
    URL = "url"
    COOKIE = "cookie"


COOKIE_CACHE_PREFIX: str = "cookies-"

ALLOWED_KEYS: dict[str, frozenset[str]] = {
    ConditionType.AND: frozenset({"type", "conditions"}),
    ConditionType.OR: frozenset({"type", "conditions"}),
    ConditionType.NOT: frozenset({"type", "condition"}),
    ConditionType.URL: frozenset({"type", "pattern"}),
    ConditionType.COOKIE: frozenset({"type", "domain", "name", "value", "value_contain"}),
}

REQUIRED_KEYS: dict[str, frozenset[str]] = {
    ConditionType.URL: frozenset({"pattern"}),
    ConditionType.COOKIE: frozenset({"domain", "name"}),
}
