"""Tests for url and cookie leaf conditions."""

from __future__ import annotations

import logging
import sqlite3
from unittest.mock import AsyncMock

import pytest

from gatewise.conditions import run
from gatewise.conditions.url import compile_pattern
from gatewise.exceptions import CookieStoreError, PatternError
from gatewise.types.cookies import CookieRecord


@pytest.mark.asyncio
async def test_url_pattern_matches_example_page() -> None:
    desc = {"type": "url", "pattern": r"^https://example\.com/"}

    assert await run(desc, {"url": "https://example.com/page"}) is True
    assert await run(desc, {"url": "https://other.com/"}) is False


@pytest.mark.asyncio
async def test_url_pattern_searches_anywhere_in_url() -> None:
    assert await run({"type": "url", "pattern": "login"}, {"url": "https://example.com/login?next=/"}) is True


@pytest.mark.asyncio
async def test_url_missing_from_context_is_empty_string() -> None:
    assert await run({"type": "url", "pattern": "^$"}, {}) is True
    assert await run({"type": "url", "pattern": "example"}, {}) is False


@pytest.mark.asyncio
async def test_invalid_url_pattern_evaluates_false(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="gatewise.conditions.url"):
        result = await run({"type": "url", "pattern": "(unclosed"}, {"url": "https://example.com/(unclosed"})

    assert result is False
    assert "invalid pattern" in caplog.text


def test_compile_pattern_raises_pattern_error() -> None:
    with pytest.raises(PatternError):
        compile_pattern("[a-")


def test_compile_pattern_rejects_non_string() -> None:
    with pytest.raises(PatternError, match="must be a string"):
        compile_pattern(42)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_cookie_with_matching_value(cookie_store) -> None:
    desc = {"type": "cookie", "domain": "example.com", "name": "session", "value": "abc"}

    store = cookie_store({"example.com": [CookieRecord(name="session", value="abc", domain="example.com")]})
    assert await run(desc, {"url": "https://example.com/"}, cookie_store=store) is True

    empty = cookie_store({"example.com": []})
    assert await run(desc, {"url": "https://example.com/"}, cookie_store=empty) is False


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("extra", "expected"),
    [
        ({}, True),
        ({"value": "token-123"}, True),
        ({"value": "token"}, False),
        ({"value_contain": "en-1"}, True),
        ({"value_contain": "xyz"}, False),
        ({"value": "token-123", "value_contain": "123"}, True),
        ({"value": "token-123", "value_contain": "999"}, False),
    ],
)
async def test_cookie_value_predicates(cookie_store, extra: dict, expected: bool) -> None:
    store = cookie_store({"example.com": [CookieRecord(name="auth", value="token-123", domain="example.com")]})
    desc = {"type": "cookie", "domain": "example.com", "name": "auth", **extra}

    assert await run(desc, {}, cookie_store=store) is expected


@pytest.mark.asyncio
async def test_cookie_name_must_match(cookie_store) -> None:
    store = cookie_store({"example.com": [CookieRecord(name="other", value="abc")]})
    desc = {"type": "cookie", "domain": "example.com", "name": "session"}

    assert await run(desc, {}, cookie_store=store) is False


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "desc",
    [
        {"type": "cookie", "name": "session"},
        {"type": "cookie", "domain": "example.com"},
    ],
)
async def test_cookie_missing_domain_or_name_is_false(cookie_store, desc: dict) -> None:
    store = cookie_store({"example.com": [CookieRecord(name="session", value="abc")]})

    assert await run(desc, {}, cookie_store=store) is False


@pytest.mark.asyncio
async def test_cookie_without_domain_does_not_fetch(cookie_store) -> None:
    store = cookie_store()

    await run({"type": "cookie", "name": "session"}, {}, cookie_store=store)

    store.get_all.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        CookieStoreError("store offline"),
        OSError("disk gone"),
        sqlite3.OperationalError("locked"),
        RuntimeError("store crashed"),
        ValueError("bad domain"),
    ],
)
async def test_cookie_store_failure_evaluates_false(cookie_store, error: Exception, caplog) -> None:
    store = cookie_store(error=error)
    desc = {"type": "cookie", "domain": "example.com", "name": "session"}

    with caplog.at_level(logging.WARNING, logger="gatewise.conditions.cookie"):
        assert await run(desc, {}, cookie_store=store) is False

    assert "Unable to fetch cookies for example.com" in caplog.text


@pytest.mark.asyncio
async def test_cookie_store_returning_none_evaluates_false(caplog) -> None:
    store = AsyncMock()
    store.get_all.return_value = None
    desc = {"type": "cookie", "domain": "example.com", "name": "session"}

    with caplog.at_level(logging.WARNING, logger="gatewise.conditions.cookie"):
        assert await run(desc, {}, cookie_store=store) is False

    assert "Unable to fetch cookies for example.com" in caplog.text


@pytest.mark.asyncio
async def test_failing_cookie_leaf_does_not_abort_sibling_branch(cookie_store) -> None:
    store = cookie_store(error=RuntimeError("store crashed"))
    desc = {
        "type": "or",
        "conditions": [
            {"type": "cookie", "domain": "example.com", "name": "session"},
            {"type": "url", "pattern": "example"},
        ],
    }

    assert await run(desc, {"url": "https://example.com/"}, cookie_store=store) is True
    store.get_all.assert_awaited_once_with("example.com")


@pytest.mark.asyncio
async def test_cookie_without_store_is_false() -> None:
    desc = {"type": "cookie", "domain": "example.com", "name": "session"}

    assert await run(desc, {}) is False
