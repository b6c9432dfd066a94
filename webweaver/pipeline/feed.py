#!/usr/bin/env python3
"""
feed.py
-------------------
Assemble and serialize the RSS 2.0 channel of a build.

Channel-level settings come from an optional YAML file:

    title: Field Notes
    link: https://example.org/
    description: Notes from the field
    language: en-us
    copyright: CC BY 4.0
    webmaster: editor@example.org
    categories: [notes, travel]
    image:
      url: https://example.org/logo.png
      title: Field Notes
      link: https://example.org/

Missing keys fall back to defaults derived from the category of the run.

Programmatic API:
    from webweaver.pipeline.feed import assemble_channel, load_channel_settings, write_feed
    settings = load_channel_settings(path, config.category)
    channel = assemble_channel(settings, units)
    write_feed(channel, Path("public/rss.xml"))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from dataclasses import dataclass, field
from datetime import datetime, time, timezone
from email.utils import format_datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence
from xml.etree.ElementTree import Element, SubElement, register_namespace, tostring

# --- Third party imports ---
import yaml

# --- Local imports ---
from webweaver.core.exceptions import ConfigurationError, FeedWriteError
from webweaver.core.logging_manager import WeaverLogger, safe_logger
from webweaver.core.paths import DEFAULT_FEED_LANGUAGE, DEFAULT_FEED_LINK, GENERATOR
from webweaver.dataclasses.content_unit import ContentUnit
from webweaver.dataclasses.feed import Category, Channel, Image, Item
from webweaver.utils.text import title_case

CONTENT_NS = "http://purl.org/rss/1.0/modules/content/"

# Characters XML 1.0 does not allow anywhere in a document
XML_ILLEGAL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


# --- Settings ---
@dataclass(frozen=True)
class ChannelSettings:
    """Channel-level metadata supplied by the user."""

    title: str
    link: str = DEFAULT_FEED_LINK
    description: str = ""
    language: Optional[str] = DEFAULT_FEED_LANGUAGE
    copyright: Optional[str] = None
    webmaster: Optional[str] = None
    categories: List[Category] = field(default_factory=list)
    image: Optional[Image] = None

    @classmethod
    def defaults(cls, category: str) -> ChannelSettings:
        """Settings used when no file is given: titled after the category."""
        title = title_case(category) or GENERATOR
        return cls(title=title, description=title)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], category: str) -> ChannelSettings:
        """
        Build settings from a parsed YAML mapping.

        Raises:
            ConfigurationError: On unknown keys or wrongly typed values
        """
        known = {
            "title", "link", "description", "language",
            "copyright", "webmaster", "categories", "image",
        }
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown channel settings: {', '.join(unknown)}")

        base = cls.defaults(category)

        raw_categories = data.get("categories") or []
        if isinstance(raw_categories, str):
            raw_categories = [raw_categories]
        if not isinstance(raw_categories, list):
            raise ConfigurationError("Channel 'categories' must be a list")
        categories = [Category(name=str(c)) for c in raw_categories]

        image = None
        raw_image = data.get("image")
        if raw_image is not None:
            if not isinstance(raw_image, dict) or "url" not in raw_image:
                raise ConfigurationError("Channel 'image' must be a mapping with a 'url'")
            image = Image(
                url=str(raw_image["url"]),
                title=str(raw_image.get("title", data.get("title", base.title))),
                link=str(raw_image.get("link", data.get("link", base.link))),
            )

        def optional(key: str, default: Optional[str] = None) -> Optional[str]:
            value = data.get(key, default)
            return None if value is None else str(value)

        title = str(data.get("title") or base.title)
        return cls(
            title=title,
            link=str(data.get("link") or base.link),
            description=str(data.get("description") or title),
            language=optional("language", base.language),
            copyright=optional("copyright"),
            webmaster=optional("webmaster"),
            categories=categories,
            image=image,
        )


def load_channel_settings(path: Optional[Path], category: str) -> ChannelSettings:
    """
    Load channel settings from YAML, or return the defaults when path is None.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid YAML,
            or does not hold a mapping
    """
    if path is None:
        return ChannelSettings.defaults(category)

    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    except OSError as e:
        raise ConfigurationError(f"Cannot read channel settings {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in channel settings {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Channel settings {path} must be a mapping")

    return ChannelSettings.from_dict(data, category)


# --- Assembly ---
def local_midnight(unit: ContentUnit) -> datetime:
    """Start of the unit's date in the local timezone."""
    return datetime.combine(unit.meta.date, time()).astimezone()


def assemble_channel(
    settings: ChannelSettings,
    units: Sequence[ContentUnit],
    now: Optional[datetime] = None,
) -> Channel:
    """
    Build the RSS channel for a set of materialized content units.

    Each unit becomes one item titled and described by its display name,
    carrying the rendered contents, published at local midnight of its
    date and linked to its output path. Items carry no categories.

    Args:
        settings: Channel-level metadata
        units: Materialized content units
        now: Build timestamp (defaults to the current UTC time)

    Returns:
        Channel whose last_build_date and pub_date are `now`
    """
    now = now or datetime.now(timezone.utc)
    stamp = format_datetime(now)

    items = [
        Item(
            title=unit.meta.name,
            link=unit.meta.path,
            description=unit.meta.name,
            content=unit.contents,
            pub_date=format_datetime(local_midnight(unit)),
        )
        for unit in units
    ]

    return Channel(
        title=settings.title,
        link=settings.link,
        description=settings.description,
        language=settings.language,
        copyright=settings.copyright,
        webmaster=settings.webmaster,
        generator=GENERATOR,
        categories=list(settings.categories),
        image=settings.image,
        items=items,
        last_build_date=stamp,
        pub_date=stamp,
    )


# --- Serialization ---
def xml_safe(value: str) -> str:
    """Remove characters that cannot appear in an XML 1.0 document."""
    return XML_ILLEGAL_CHARS.sub("", value)


def _text(parent: Element, tag: str, value: Optional[str]) -> None:
    if value is not None:
        SubElement(parent, tag).text = xml_safe(value)


def _category(parent: Element, category: Category) -> None:
    attrib = {"domain": xml_safe(category.domain)} if category.domain else {}
    SubElement(parent, "category", attrib=attrib).text = xml_safe(category.name)


def channel_to_xml(channel: Channel) -> str:
    """Serialize a Channel to an RSS 2.0 XML document."""
    register_namespace("content", CONTENT_NS)

    rss = Element("rss", attrib={"version": "2.0"})
    root = SubElement(rss, "channel")
    _text(root, "title", channel.title)
    _text(root, "link", channel.link)
    _text(root, "description", channel.description)
    _text(root, "language", channel.language)
    _text(root, "copyright", channel.copyright)
    _text(root, "webMaster", channel.webmaster)
    _text(root, "generator", channel.generator)
    _text(root, "pubDate", channel.pub_date)
    _text(root, "lastBuildDate", channel.last_build_date)
    for category in channel.categories:
        _category(root, category)

    if channel.image is not None:
        image_el = SubElement(root, "image")
        _text(image_el, "url", channel.image.url)
        _text(image_el, "title", channel.image.title)
        _text(image_el, "link", channel.image.link)

    for item in channel.items:
        item_el = SubElement(root, "item")
        _text(item_el, "title", item.title)
        _text(item_el, "link", item.link)
        _text(item_el, "description", item.description)
        _text(item_el, f"{{{CONTENT_NS}}}encoded", item.content)
        _text(item_el, "pubDate", item.pub_date)
        for category in item.categories:
            _category(item_el, category)

    body = tostring(rss, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'


def write_feed(
    channel: Channel, path: Path, logger: Optional[WeaverLogger] = None
) -> Path:
    """
    Write the serialized channel to `path`, creating parent directories.

    Raises:
        FeedWriteError: If the file cannot be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(channel_to_xml(channel), encoding="utf-8")
    except OSError as e:
        raise FeedWriteError(f"Cannot write feed to {path}: {e}") from e

    safe_logger(logger).log_operation(
        "feed_written", {"path": str(path), "items": len(channel.items)}
    )
    return path
