"""Tests for tater.i18n.store module."""

from types import MappingProxyType

import pytest

from tater.i18n import MessageStore


class TestMessageStore:
    """Tests for MessageStore."""

    def test_starts_empty(self):
        store = MessageStore()
        assert dict(store.messages) == {}
        assert store.locales() == []

    def test_merges_sources_in_order(self):
        """load() merges later sources over earlier ones."""
        store = MessageStore()
        count = store.load([{"en": {"a": "1", "b": {"c": "2"}}}, {"en": {"a": "3", "b": {"d": "4"}}}])

        assert count == 2
        assert store.messages["en"]["a"] == "3"
        assert dict(store.messages["en"]["b"]) == {"c": "2", "d": "4"}

    def test_stringifies_keys(self):
        """load() converts non-string keys to strings."""
        store = MessageStore()
        store.load([{"en": {1: "one"}}])
        assert store.messages["en"]["1"] == "one"

    def test_freezes_tree(self):
        """load() leaves a read-only tree behind."""
        store = MessageStore()
        store.load([{"en": {"a": "1"}}])

        assert isinstance(store.messages, MappingProxyType)
        with pytest.raises(TypeError):
            store.messages["en"]["a"] = "2"

    def test_earlier_trees_are_not_modified(self):
        """load() builds a new tree instead of patching the old one."""
        store = MessageStore()
        store.load([{"en": {"a": "1"}}])
        before = store.messages["en"]

        store.load([{"en": {"a": "2", "b": "3"}}])

        assert dict(before) == {"a": "1"}
        assert dict(store.messages["en"]) == {"a": "2", "b": "3"}

    def test_empty_load_keeps_tree(self):
        """load() with no sources leaves the tree untouched."""
        store = MessageStore()
        store.load([{"en": {"a": "1"}}])
        before = store.messages

        assert store.load([]) == 0
        assert store.messages is before

    def test_failed_load_keeps_tree(self):
        """load() keeps the previous tree when a source raises."""
        store = MessageStore()
        store.load([{"en": {"a": "1"}}])

        def _sources():
            yield {"en": {"a": "2"}}
            raise OSError("unreadable")

        with pytest.raises(OSError):
            store.load(_sources())
        assert store.messages["en"]["a"] == "1"

    def test_locales_are_sorted(self):
        store = MessageStore()
        store.load([{"fr": {}, "en": {}, "de": {}}])
        assert store.locales() == ["de", "en", "fr"]
