#!/usr/bin/env python3
"""
feed.py
-------------------

Dataclasses for an RSS 2.0 syndication channel.

Dates are stored already formatted as RFC 2822 strings, the form RSS
expects on the wire.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Category:
    """An RSS <category>, optionally scoped to a taxonomy domain."""

    name: str
    domain: Optional[str] = None


@dataclass(frozen=True)
class Image:
    """Channel <image>: the logo shown by feed readers."""

    url: str
    title: str
    link: str


@dataclass
class Item:
    """
    One syndicated content unit.

    Attributes:
        title: Item title
        link: Item link (output path of the unit)
        description: Short summary
        content: Full rendered body
        pub_date: RFC 2822 publication timestamp
        categories: Per-item categories; not populated by the assembler yet
    """

    title: str
    link: str
    description: str
    content: str
    pub_date: str
    categories: List[Category] = field(default_factory=list)


@dataclass
class Channel:
    """
    RSS channel with its items.

    Attributes:
        title, link, description: Required channel elements
        language, copyright, webmaster: Optional channel elements
        generator: Program that produced the channel
        categories: Channel-level categories
        image: Optional channel image
        items: Syndicated items, one per content unit
        last_build_date, pub_date: RFC 2822 timestamps of the build
    """

    title: str
    link: str
    description: str
    language: Optional[str] = None
    copyright: Optional[str] = None
    webmaster: Optional[str] = None
    generator: Optional[str] = None
    categories: List[Category] = field(default_factory=list)
    image: Optional[Image] = None
    items: List[Item] = field(default_factory=list)
    last_build_date: Optional[str] = None
    pub_date: Optional[str] = None
