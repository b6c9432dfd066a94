"""
text.py
-------------------
Display-text helpers for the index and feed.
"""
from __future__ import annotations

from datetime import date


def title_case(text: str) -> str:
    """
    Uppercase the first character of every whitespace-separated word.

    The rest of each word is left untouched and runs of whitespace
    collapse to a single space.

    Examples:
        >>> title_case("field notes")
        'Field Notes'
        >>> title_case("blog/rust")
        'Blog/rust'
    """
    return " ".join(word[:1].upper() + word[1:] for word in text.split())


def display_date(value: date) -> str:
    """Format a date as 'Month DD, YYYY' (e.g. 'July 04, 2023')."""
    return f"{value:%B} {value.day:02d}, {value.year}"
