#!/usr/bin/env python3
"""
slugify.py
----------
Filesystem-friendly names for materialized content files.

The mapping is deliberately lossy: punctuation is dropped, not replaced,
so distinct titles can map to the same name:

    friendly_filename("My, Post!")  # 'my_post'
    friendly_filename("My Post")    # 'my_post'
"""
from __future__ import annotations

SPACE_REPLACEMENT = "_"


def friendly_filename(name: str) -> str:
    """
    Convert a display name to the slug used for its output filename.

    - Alphanumeric characters are kept; ASCII letters are lowercased
    - Spaces become underscores
    - Everything else is dropped, except underscores

    Underscores are kept rather than dropped so that applying the
    function to its own output changes nothing:
    friendly_filename(friendly_filename(x)) == friendly_filename(x).
    Content names never contain '_' (the filename parser rejects them),
    so this does not change any slug the pipeline produces.

    Args:
        name: Display name taken from the content filename

    Returns:
        Slug (may be empty if the name has no alphanumerics or spaces)

    Examples:
        >>> friendly_filename("Hello World")
        'hello_world'
        >>> friendly_filename("C'est la vie!")
        'cest_la_vie'
    """
    chars = []
    for c in name:
        if c.isalnum():
            # Non-ASCII letters keep their case
            chars.append(c.lower() if c.isascii() else c)
        elif c == " " or c == SPACE_REPLACEMENT:
            chars.append(SPACE_REPLACEMENT)
    return "".join(chars)
