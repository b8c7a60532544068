"""Host and base-domain extraction for breakage matching."""

from __future__ import annotations

import ipaddress
from urllib.parse import urlparse

from gatewise.constants.breakages import SECOND_LEVEL_SUFFIXES
from gatewise.types.breakages import UrlInfo


def extract_host(url: str) -> str:
    """Return the lowercase hostname of *url*, or an empty string."""
    try:
        host = urlparse(url.strip()).hostname
    except ValueError:
        return ""
    return (host or "").lower().rstrip(".")


def base_domain(host: str) -> str:
    """Return the registrable domain for *host*.

    IP literals and single-label hosts are their own base domain.
    """
    if not host:
        return ""
    try:
        ipaddress.ip_address(host.strip("[]"))
        return host
    except ValueError:
        pass

    labels = host.split(".")
    if len(labels) <= 2:
        return host
    if ".".join(labels[-2:]) in SECOND_LEVEL_SUFFIXES:
        return ".".join(labels[-3:])
    return ".".join(labels[-2:])


def url_info(url: str) -> UrlInfo:
    host = extract_host(url)
    return UrlInfo(host=host, base_domain=base_domain(host))
