"""URL pattern condition."""

from __future__ import annotations

import logging
import re

from gatewise.conditions.base import Condition
from gatewise.exceptions import PatternError

logger = logging.getLogger(__name__)


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a URL condition pattern, raising PatternError when invalid."""
    if not isinstance(pattern, str):
        raise PatternError(f"pattern must be a string, got {type(pattern).__name__}")
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise PatternError(f"invalid pattern {pattern!r}: {exc}") from exc


class UrlCondition(Condition):
    """Searches the context URL with the descriptor's regular expression."""

    def evaluate(self) -> bool:
        url = self.factory.context.get("url") or ""
        try:
            regex = compile_pattern(self.field("pattern", ""))
        except PatternError as exc:
            logger.warning("URL condition failed: %s", exc)
            return False
        return regex.search(str(url)) is not None
