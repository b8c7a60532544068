"""Breakage lists and the activator that matches URLs against them."""

from __future__ import annotations

from gatewise.breakages.activator import BreakageActivator
from gatewise.breakages.catalog import BreakageCatalog, find_breakage
from gatewise.breakages.loader import load_breakage_file, parse_breakage
from gatewise.breakages.notified import NotifiedDomainStore
from gatewise.breakages.urls import base_domain, extract_host, url_info
from gatewise.breakages.validation import validate_breakage_file

__all__ = [
    "BreakageActivator",
    "BreakageCatalog",
    "NotifiedDomainStore",
    "base_domain",
    "extract_host",
    "find_breakage",
    "load_breakage_file",
    "parse_breakage",
    "url_info",
    "validate_breakage_file",
]
