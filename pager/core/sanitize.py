"""Turn raw page/size query values into a safe zero-based page and positive size.

Inputs come straight from the query string (strings), from callers that
already hold numbers, or are missing altogether. Nothing here raises: every
value that cannot be read as an integer falls back to a default.
"""

import logging
import math
import re
from typing import NamedTuple

from pager.core.config import DEFAULT_PAGE_SIZE

logger = logging.getLogger(__name__)

RawValue = str | int | float | None

# Leading-integer parse: "12", " 7", "-3", "12abc" all read; '"6"' does not.
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


class Sanitized(NamedTuple):
    page: int
    size: int


def parse_int(raw: RawValue) -> int | None:
    """Read ``raw`` as a base-10 integer, or return None when it is not a number."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    if isinstance(raw, str):
        match = _LEADING_INT.match(raw)
        if not match:
            return None
        try:
            return int(match.group(1))
        except ValueError:
            # digit run longer than the interpreter will convert
            return None
    return None


def sanitize(raw_page: RawValue, raw_size: RawValue) -> Sanitized:
    """Return the zero-based page index and page size for one-based ``raw_page``."""
    page = parse_int(raw_page)
    size = parse_int(raw_size)

    if page is not None:
        page -= 1

    if page is None or page < 0:
        if raw_page is not None:
            logger.debug("Page value %r is not usable, falling back to 0", raw_page)
        page = 0

    if size is None or size < 1:
        if raw_size is not None:
            logger.debug(
                "Size value %r is not usable, falling back to %d", raw_size, DEFAULT_PAGE_SIZE
            )
        size = DEFAULT_PAGE_SIZE

    return Sanitized(page=page, size=size)
