"""Slug and date inference from dated source filenames.

Sources named like ``_posts/2023-5-1-hello-world.md`` carry their publication
date and slug in the filename.
"""

from __future__ import annotations

import re
from datetime import datetime, tzinfo
from pathlib import PurePath

from dateutil import parser as date_parser

from folio.exceptions import DateParseError

DATE_FILENAME_MATCHER = re.compile(r"^(?:.+/)*?(\d{2,4}-\d{1,2}-\d{1,2})-([^/]*)(\.[^.]+)$")
_TRAILING_DOTS = re.compile(r"\.*\Z")


def match_date_and_slug(path: str | PurePath) -> tuple[str, str] | None:
    """Return the ``(date, slug)`` strings encoded in ``path``, if any.

    Trailing dots are stripped from the slug.

    >>> match_date_and_slug("_posts/2023-5-1-hello-world.md")
    ('2023-5-1', 'hello-world')
    >>> match_date_and_slug("about.md") is None
    True
    """
    match = DATE_FILENAME_MATCHER.match(PurePath(path).as_posix())
    if match is None:
        return None
    date_string, slug = match.group(1), match.group(2)
    return date_string, _TRAILING_DOTS.sub("", slug)


def strip_date_prefix(filename: str) -> str:
    """Return ``filename`` without its ``YYYY-MM-DD-`` prefix, keeping the extension."""
    match = DATE_FILENAME_MATCHER.match(filename)
    if match is None:
        return filename
    return match.group(2) + match.group(3)


def parse_date(value: str, *, path: str, origin: str, tz: tzinfo | None = None) -> datetime:
    """Parse a filename date string, year first.

    Raises:
        DateParseError: If ``value`` is not a valid date.

    """
    try:
        parsed = date_parser.parse(value, yearfirst=True, dayfirst=False)
    except (ValueError, OverflowError) as exc:
        raise DateParseError(path, origin, value) from exc
    if tz is not None and parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz)
    return parsed
