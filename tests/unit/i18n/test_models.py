"""Tests for tater.i18n.models module."""

from types import MappingProxyType

import pytest

from tater.i18n.models import RESERVED_OPTIONS, CacheKey, MessageKind, strip_reserved


class TestMessageKind:
    """Tests for MessageKind.classify()."""

    def test_classifies_text(self):
        assert MessageKind.classify("hello") is MessageKind.TEXT

    def test_classifies_callable(self):
        assert MessageKind.classify(lambda key, options: key) is MessageKind.CALLABLE

    def test_classifies_list(self):
        assert MessageKind.classify(("a", "b")) is MessageKind.LIST
        assert MessageKind.classify(["a"]) is MessageKind.LIST

    def test_classifies_nested(self):
        assert MessageKind.classify(MappingProxyType({"a": "b"})) is MessageKind.NESTED

    def test_absent(self):
        """classify() returns None for absent values."""
        assert MessageKind.classify(None) is None
        assert MessageKind.classify(42) is None


class TestCacheKey:
    """Tests for CacheKey model."""

    def test_is_hashable_and_frozen(self):
        """CacheKey can be used as a dict key and cannot be mutated."""
        key = CacheKey(locale="en", cascade=False, key="a.b")
        assert {key: "X"}[CacheKey("en", False, "a.b")] == "X"

        with pytest.raises(AttributeError):
            key.locale = "fr"

    def test_cascade_is_part_of_identity(self):
        assert CacheKey("en", True, "a.b") != CacheKey("en", False, "a.b")


class TestStripReserved:
    """Tests for strip_reserved()."""

    def test_removes_reserved_names(self):
        options = {name: "x" for name in RESERVED_OPTIONS}
        options["name"] = "Ada"
        assert strip_reserved(options) == {"name": "Ada"}

    def test_does_not_modify_input(self):
        options = {"locale": "en", "name": "Ada"}
        strip_reserved(options)
        assert options == {"locale": "en", "name": "Ada"}
