"""Filename rules for drafts and published posts.

Everything here is a pure string function: no filesystem access.
"""

from __future__ import annotations

import re
import unicodedata
from datetime import date, datetime

DATE_FORMAT = "%Y-%m-%d"

_DATE_PREFIX_RE = re.compile(r"^(?:\d{4}-\d{2}-\d{2}-)+", re.ASCII)
_PUBLISHED_RE = re.compile(r"^(\d{4}-\d{2}-\d{2})-.+$", re.ASCII)
_UNSAFE_RUN_RE = re.compile(r"[^\w-]+")


def dasherize(text: str) -> str:
    """Collapse every run of characters other than letters, digits, ``_`` and
    ``-`` into a single dash.
    """
    return _UNSAFE_RUN_RE.sub("-", text).strip("-")


def slugify(title: str) -> str:
    """Derive the filesystem- and URL-safe slug for a post title.

    >>> slugify("Hello World")
    'hello_world'
    >>> slugify("What's New?")
    'what-s-new'
    >>> slugify("Café Crème")
    'café_crème'
    """
    text = unicodedata.normalize("NFC", title).lower()
    return dasherize(text.replace(" ", "_"))


def draft_filename(title: str) -> str:
    return f"{slugify(title)}.md"


def date_prefix(day: date) -> str:
    return f"{day.strftime(DATE_FORMAT)}-"


def published_filename(filename: str, day: date) -> str:
    """Prefix a draft filename with its publish date."""
    return date_prefix(day) + filename


def strip_date_prefix(filename: str) -> str:
    """Remove the leading ``YYYY-MM-DD-`` prefix from a filename.

    Repeated prefixes are removed together, so the function is idempotent.
    Names without a prefix are returned unchanged.
    """
    return _DATE_PREFIX_RE.sub("", filename, count=1)


def is_published_filename(filename: str) -> bool:
    return _PUBLISHED_RE.match(filename) is not None


def parse_publish_date(filename: str) -> date | None:
    """Return the date encoded in a published filename, if any."""
    match = _PUBLISHED_RE.match(filename)
    if match is None:
        return None
    try:
        return datetime.strptime(match.group(1), DATE_FORMAT).date()
    except ValueError:
        return None
