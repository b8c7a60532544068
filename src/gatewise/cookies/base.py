"""Cookie store protocol and domain matching shared by the stores."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from gatewise.types.cookies import CookieRecord


@runtime_checkable
class CookieStore(Protocol):
    """Asynchronous source of cookies for a domain."""

    async def get_all(self, domain: str) -> Sequence[CookieRecord]:
        """Return every cookie whose domain is *domain* or one of its subdomains."""
        ...


def normalize_cookie_domain(domain: str) -> str:
    """Lowercase a cookie domain and strip the leading dot of domain cookies."""
    return domain.strip().lower().lstrip(".")


def cookie_matches_domain(cookie_domain: str, domain: str) -> bool:
    """Return True when *cookie_domain* equals *domain* or is a subdomain of it."""
    cookie_host = normalize_cookie_domain(cookie_domain)
    query = normalize_cookie_domain(domain)
    if not cookie_host or not query:
        return False
    return cookie_host == query or cookie_host.endswith(f".{query}")
