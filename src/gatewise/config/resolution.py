"""Build runtime collaborators from a resolved config."""

from __future__ import annotations

import logging

from gatewise.breakages.activator import BreakageActivator
from gatewise.breakages.catalog import BreakageCatalog
from gatewise.breakages.notified import NotifiedDomainStore
from gatewise.config.model import GatewiseConfig
from gatewise.cookies.base import CookieStore
from gatewise.cookies.firefox import FirefoxCookieStore
from gatewise.cookies.memory import InMemoryCookieStore
from gatewise.exceptions import ConfigError

logger = logging.getLogger(__name__)


def build_cookie_store(config: GatewiseConfig) -> CookieStore | None:
    """Return the configured cookie store, or None when none is configured."""
    if config.cookies_db is not None and config.cookies_file is not None:
        raise ConfigError("Cookie source conflict: set either cookies_db or cookies_file, not both.")
    if config.cookies_db is not None:
        logger.debug("Using Firefox cookie database %s", config.cookies_db)
        return FirefoxCookieStore(config.cookies_db)
    if config.cookies_file is not None:
        return InMemoryCookieStore.from_file(config.cookies_file)
    return None


def build_activator(config: GatewiseConfig, *, cookie_store: CookieStore | None = None) -> BreakageActivator:
    """Load the breakage catalog and notified-domain state described by *config*."""
    catalog = BreakageCatalog.from_files(config.breakages, config.dynamic_breakages)
    notified = NotifiedDomainStore(config.notified_domains_file)
    store = cookie_store if cookie_store is not None else build_cookie_store(config)
    return BreakageActivator(catalog, notified, cookie_store=store)
