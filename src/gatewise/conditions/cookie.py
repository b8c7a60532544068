"""Cookie condition: checks a named cookie for a domain."""

from __future__ import annotations

import logging

from gatewise.conditions.base import Condition
from gatewise.constants.conditions import COOKIE_CACHE_PREFIX
from gatewise.types.cookies import CookieRecord

logger = logging.getLogger(__name__)


class CookieCondition(Condition):
    """True when a cookie named ``name`` exists for ``domain`` and its value matches.

    ``value`` requires an exact match, ``value_contain`` a substring; when
    both are set both must hold.
    """

    @property
    def cache_key(self) -> str:
        return f"{COOKIE_CACHE_PREFIX}{self.field('domain')}"

    async def initialize(self) -> None:
        domain = self.field("domain")
        if not domain:
            return
        await self.factory.load_once(self.cache_key, lambda: self._fetch(domain))

    async def _fetch(self, domain: str) -> list[CookieRecord]:
        store = self.factory.cookie_store
        if store is None:
            logger.warning("No cookie store configured; treating %s as having no cookies", domain)
            return []
        try:
            return list(await store.get_all(domain))
        except Exception as exc:
            logger.warning("Unable to fetch cookies for %s: %s", domain, exc)
            return []

    def evaluate(self) -> bool:
        domain = self.field("domain")
        name = self.field("name")
        if not domain or not name:
            return False

        cookies = self.factory.retrieve_data(self.cache_key) or []
        cookie = next((c for c in cookies if c.name == name), None)
        if cookie is None:
            return False

        value = self.field("value")
        if value is not None and cookie.value != value:
            return False

        value_contain = self.field("value_contain")
        if value_contain is not None and str(value_contain) not in cookie.value:
            return False

        return True
