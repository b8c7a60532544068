"""Read-only cookie store over a Firefox ``cookies.sqlite`` database.

Modern profiles keep cookies in ``moz_cookies``; very old ones use a
``cookies`` table. The database is opened read-only and queried in a
worker thread so condition initialization does not block the event loop.
"""

from __future__ import annotations

import asyncio
import logging
import sqlite3
from pathlib import Path

from gatewise.cookies.base import cookie_matches_domain, normalize_cookie_domain
from gatewise.exceptions import CookieStoreError
from gatewise.types.cookies import CookieRecord

logger = logging.getLogger(__name__)


class FirefoxCookieStore:
    """Cookie store backed by a Firefox profile cookie database."""

    def __init__(self, db_path: Path) -> None:
        self._db_path = db_path

    @property
    def db_path(self) -> Path:
        return self._db_path

    async def get_all(self, domain: str) -> list[CookieRecord]:
        return await asyncio.to_thread(self._query, domain)

    def _query(self, domain: str) -> list[CookieRecord]:
        if not self._db_path.is_file():
            raise CookieStoreError(f"Cookie database not found: {self._db_path}")

        query_domain = normalize_cookie_domain(domain)
        try:
            conn = sqlite3.connect(f"file:{self._db_path}?mode=ro", uri=True)
        except sqlite3.Error as exc:
            raise CookieStoreError(f"Cannot open cookie database {self._db_path}: {exc}") from exc

        try:
            conn.row_factory = sqlite3.Row
            cursor = conn.cursor()
            cursor.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name IN ('moz_cookies', 'cookies')"
            )
            tables = {row[0] for row in cursor.fetchall()}
            if "moz_cookies" in tables:
                table_name = "moz_cookies"
            elif "cookies" in tables:
                table_name = "cookies"
            else:
                raise CookieStoreError(f"No cookie table in {self._db_path}")

            cursor.execute(f"PRAGMA table_info({table_name})")
            columns = {row[1] for row in cursor.fetchall()}
            has_path = "path" in columns

            # host LIKE narrows the scan; exact subdomain matching happens below.
            cursor.execute(
                f"SELECT name, value, host{', path' if has_path else ''} FROM {table_name} WHERE host LIKE ?",
                (f"%{query_domain}",),
            )
            records = [
                CookieRecord(
                    name=row["name"],
                    value=row["value"] or "",
                    domain=row["host"],
                    path=row["path"] if has_path else "/",
                )
                for row in cursor
                if cookie_matches_domain(row["host"], query_domain)
            ]
        except sqlite3.Error as exc:
            raise CookieStoreError(f"Failed to query cookies in {self._db_path}: {exc}") from exc
        finally:
            conn.close()

        logger.debug("Loaded %d cookies for %s from %s", len(records), query_domain, self._db_path)
        return records
