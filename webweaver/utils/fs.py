#!/usr/bin/env python3
"""
fs.py
-------------------
Content filename grammar.

Content files are named `<YYYY-MM-DD>_<display name>.<ext>`:

    2023-07-04_Hello World.adoc
    └──┬─────┘ └────┬────┘ └┬─┘
      date        name     ext

Functions:
    parse_content_filename: Split a content filename into date, name and extension
    date_segments: Year / zero-padded month / zero-padded day path segments

Usage:
    from webweaver.utils.fs import parse_content_filename

    parsed = parse_content_filename("2023-07-04_Hello World.adoc")
    parsed.date       # date(2023, 7, 4)
    parsed.name       # 'Hello World'
    parsed.file_ext   # 'adoc'
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from datetime import date, datetime
from typing import List, NamedTuple

# --- Local imports ---
from webweaver.core.exceptions import InvalidDate, MalformedFilename, MissingExtension

DATE_FORMAT = "%Y-%m-%d"
DATE_PREFIX_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
NAME_SEPARATOR = "_"


class ParsedFilename(NamedTuple):
    """Fields recovered from a content filename."""

    date: date
    name: str
    file_ext: str


def parse_content_filename(filename: str) -> ParsedFilename:
    """
    Parse a content filename into its date, display name and extension.

    The extension is everything after the last '.'. The remaining stem
    must contain exactly one '_', separating the date prefix from the
    display name. The name is kept verbatim (spaces, punctuation).

    Args:
        filename: Bare file name (no directory part)

    Returns:
        ParsedFilename(date, name, file_ext)

    Raises:
        MissingExtension: No '.' or nothing after the last '.'
        MalformedFilename: Empty stem, no '_' or more than one '_', or an
            empty date or name part
        InvalidDate: Date prefix is not a valid YYYY-MM-DD date

    Examples:
        >>> parse_content_filename("2023-07-04_Hello World.adoc")
        ParsedFilename(date=datetime.date(2023, 7, 4), name='Hello World', file_ext='adoc')
    """
    if "." not in filename:
        raise MissingExtension(f"No extension in filename: {filename!r}")

    stem, file_ext = filename.rsplit(".", 1)
    if not stem:
        raise MalformedFilename(f"No stem in filename: {filename!r}")
    if not file_ext:
        raise MissingExtension(f"Empty extension in filename: {filename!r}")

    separators = stem.count(NAME_SEPARATOR)
    if separators != 1:
        raise MalformedFilename(
            f"Expected exactly one {NAME_SEPARATOR!r} in stem {stem!r}, found {separators}"
        )

    date_str, name = stem.split(NAME_SEPARATOR, 1)
    if not date_str or not name:
        raise MalformedFilename(f"Empty date or name in filename: {filename!r}")

    if not DATE_PREFIX_RE.match(date_str):
        raise InvalidDate(f"Date prefix {date_str!r} in {filename!r} is not YYYY-MM-DD")
    try:
        parsed_date = datetime.strptime(date_str, DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidDate(f"Invalid date prefix {date_str!r} in {filename!r}: {e}") from e

    return ParsedFilename(date=parsed_date, name=name, file_ext=file_ext)


def date_segments(value: date) -> List[str]:
    """Return ['YYYY', 'MM', 'DD'] for a date."""
    return [f"{value.year}", f"{value.month:02d}", f"{value.day:02d}"]
