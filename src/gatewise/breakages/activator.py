"""Decide which breakage notice, if any, applies to a URL."""

from __future__ import annotations

import logging

from gatewise.breakages.catalog import BreakageCatalog
from gatewise.breakages.notified import NotifiedDomainStore
from gatewise.breakages.urls import url_info
from gatewise.conditions.factory import run
from gatewise.conditions.registry import ConditionRegistry
from gatewise.cookies.base import CookieStore
from gatewise.types.breakages import Breakage
from gatewise.types.common import BreakageKind

logger = logging.getLogger(__name__)


class BreakageActivator:
    """Matches URLs against the catalog, gated by conditions and notified domains."""

    def __init__(
        self,
        catalog: BreakageCatalog,
        notified: NotifiedDomainStore | None = None,
        *,
        cookie_store: CookieStore | None = None,
        registry: ConditionRegistry | None = None,
    ) -> None:
        self._catalog = catalog
        self._notified = notified if notified is not None else NotifiedDomainStore()
        self._cookie_store = cookie_store
        self._registry = registry

    @property
    def catalog(self) -> BreakageCatalog:
        return self._catalog

    @property
    def notified(self) -> NotifiedDomainStore:
        return self._notified

    async def maybe_notify(
        self,
        url: str,
        kind: BreakageKind = "tab",
        *,
        tab_id: int | None = None,
        dry_run: bool = False,
    ) -> Breakage | None:
        """Return the breakage to report for *url*, recording its base domain.

        Returns None when the URL has no host, its base domain was already
        notified, no breakage lists it, or the breakage condition fails.
        """
        info = url_info(url)
        if not info.base_domain and not info.host:
            return None

        if info.base_domain and info.base_domain in self._notified:
            logger.debug("Skipping %s: already notified", info.base_domain)
            return None

        breakage = self._catalog.find(kind, info)
        if breakage is None:
            return None

        context = {"url": url, "tab_id": tab_id}
        if not await run(breakage.condition, context, cookie_store=self._cookie_store, registry=self._registry):
            logger.debug("Breakage for %s matched but its condition failed", info.host)
            return None

        if not dry_run:
            self._notified.add(info.base_domain)
        logger.info("Breakage matched for %s (%s)", info.base_domain, breakage.source or kind)
        return breakage
