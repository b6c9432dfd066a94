"""
test_feed_dataclasses.py
------------------------
Unit tests for the RSS feed dataclasses.
"""
from webweaver.dataclasses.feed import Category, Channel, Image, Item


class TestItem:
    """Test Item dataclass."""

    def test_categories_default_empty(self):
        """Test items start without categories."""
        item = Item(title="t", link="l", description="d", content="c", pub_date="p")
        assert item.categories == []

    def test_categories_not_shared(self):
        """Test each item gets its own categories list."""
        a = Item(title="a", link="l", description="d", content="c", pub_date="p")
        b = Item(title="b", link="l", description="d", content="c", pub_date="p")
        a.categories.append(Category("x"))
        assert b.categories == []


class TestChannel:
    """Test Channel dataclass."""

    def test_optional_fields_default_none(self):
        """Test optional channel elements are unset by default."""
        channel = Channel(title="Blog", link="/", description="Blog")
        assert channel.language is None
        assert channel.image is None
        assert channel.items == []
        assert channel.last_build_date is None

    def test_image(self):
        """Test channel image fields."""
        image = Image(url="https://example.org/logo.png", title="Blog", link="/")
        channel = Channel(title="Blog", link="/", description="Blog", image=image)
        assert channel.image.url.endswith("logo.png")
