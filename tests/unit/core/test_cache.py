"""Unit tests for core/cache.py"""

import pytest

from mdmatter.core.cache import MatterCache
from mdmatter.core.models import Document


@pytest.fixture(name="cache")
def cache_fixture():
    return MatterCache()


def test_get_missing_returns_none(cache):
    assert cache.get("nothing") is None
    assert len(cache) == 0


def test_put_and_get_return_copies(cache):
    """Mutating a stored or returned Document never changes the cached entry."""
    doc = Document(content="body", data={"a": 1})
    cache.put("key", doc)
    doc.data["a"] = 2

    first = cache.get("key")
    assert first.data == {"a": 1}
    first.data["a"] = 3
    first.path = "elsewhere"
    second = cache.get("key")
    assert second.data == {"a": 1}
    assert second.path is None


def test_entries_is_read_only_snapshot(cache):
    cache.put("key", Document(content="body"))
    entries = cache.entries()
    assert list(entries) == ["key"]
    with pytest.raises(TypeError):
        entries["other"] = Document()
    cache.clear()
    assert "key" in entries
    assert "key" not in cache


def test_clear_drops_everything(cache):
    cache.put("a", Document())
    cache.put("b", Document())
    cache.clear()
    assert len(cache) == 0


def test_entries_values_are_copies(cache):
    """Mutating a Document from entries() leaves the cached result intact."""
    cache.put("key", Document(content="body", data={"abc": "xyz"}))
    cache.entries()["key"].data["abc"] = "changed"
    assert cache.get("key").data == {"abc": "xyz"}
    assert cache.entries()["key"].data == {"abc": "xyz"}
