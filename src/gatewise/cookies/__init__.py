"""Cookie stores consulted by cookie conditions."""

from __future__ import annotations

from gatewise.cookies.base import CookieStore, cookie_matches_domain, normalize_cookie_domain
from gatewise.cookies.firefox import FirefoxCookieStore
from gatewise.cookies.memory import InMemoryCookieStore

__all__ = [
    "CookieStore",
    "FirefoxCookieStore",
    "InMemoryCookieStore",
    "cookie_matches_domain",
    "normalize_cookie_domain",
]
