import threading

import pytest

from kvhttpd.store import (
    MAX_KEY_LENGTH,
    MAX_PAIRS,
    MAX_VALUE_LENGTH,
    KeyValueStore,
)


def test_add_then_contains():
    store = KeyValueStore()
    assert store.add("name", "alice") is True
    assert store.contains("name", "alice")
    assert not store.contains("name", "bob")
    assert len(store) == 1


def test_duplicates_are_kept():
    store = KeyValueStore()
    store.add("a", "1")
    store.add("a", "1")
    assert store.pairs() == [("a", "1"), ("a", "1")]


def test_capacity_is_enforced():
    store = KeyValueStore(capacity=2)
    assert store.add("a", "1")
    assert store.add("b", "2")
    assert store.add("c", "3") is False
    assert len(store) == 2
    assert not store.contains("c", "3")


def test_default_capacity():
    store = KeyValueStore()
    for i in range(MAX_PAIRS + 50):
        store.add(f"k{i}", "v")
    assert len(store) == MAX_PAIRS


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        KeyValueStore(capacity=-1)


def test_delete_keeps_order_of_rest():
    store = KeyValueStore()
    for key in ("a", "b", "c"):
        store.add(key, "x")
    assert store.delete("b", "x") is True
    assert store.pairs() == [("a", "x"), ("c", "x")]


def test_delete_removes_only_one_duplicate():
    store = KeyValueStore()
    store.add("a", "1")
    store.add("a", "1")
    assert store.delete("a", "1")
    assert store.pairs() == [("a", "1")]


def test_delete_missing_returns_false():
    store = KeyValueStore()
    store.add("a", "1")
    assert store.delete("a", "2") is False
    assert len(store) == 1


def test_long_fields_are_truncated():
    store = KeyValueStore()
    store.add("k" * 100, "v" * 400)
    [(key, value)] = store.pairs()
    assert len(key) == MAX_KEY_LENGTH
    assert len(value) == MAX_VALUE_LENGTH


def test_render_html_empty():
    store = KeyValueStore()
    assert store.render_html("<p>x</p>") == "<p>x</p><h2>Saved Pairs:</h2><ul></ul>"


def test_render_html_lists_pairs_in_order():
    store = KeyValueStore()
    store.add("a", "1")
    store.add("b", "2")
    html = store.render_html("")
    assert "<li>a: 1</li>" in html
    assert html.index("<li>a: 1</li>") < html.index("<li>b: 2</li>")
    assert html.endswith("</ul>")


def test_pairs_is_a_snapshot():
    store = KeyValueStore()
    store.add("a", "1")
    snapshot = store.pairs()
    store.add("b", "2")
    assert snapshot == [("a", "1")]


def test_concurrent_adds_respect_capacity():
    store = KeyValueStore(capacity=50)

    def worker(n):
        for i in range(20):
            store.add(f"{n}-{i}", "v")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(5)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(store) == 50