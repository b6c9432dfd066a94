"""
Data structures for content units and syndication feeds.
"""
from webweaver.dataclasses.content_unit import ContentMetaUnit, ContentUnit
from webweaver.dataclasses.feed import Category, Channel, Image, Item

__all__ = [
    "ContentMetaUnit",
    "ContentUnit",
    "Category",
    "Channel",
    "Image",
    "Item",
]
