"""Thread-safe, bounded store of key/value pairs."""

from __future__ import annotations

import threading
from collections.abc import Iterable

MAX_PAIRS = 100
MAX_KEY_LENGTH = 63
MAX_VALUE_LENGTH = 255

SAVED_PAIRS_HEADING = "<h2>Saved Pairs:</h2>"


class KeyValueStore:
    """An ordered list of key/value pairs with a fixed capacity.

    Duplicate pairs are allowed. Keys and values longer than the field
    limits are truncated when stored. Adding to a full store is ignored.
    """

    def __init__(self, capacity: int = MAX_PAIRS) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._pairs: list[tuple[str, str]] = []
        self._lock = threading.Lock()

    def add(self, key: str, value: str) -> bool:
        """Append a pair; return False if the store is full."""
        with self._lock:
            if len(self._pairs) >= self.capacity:
                return False
            self._pairs.append((key[:MAX_KEY_LENGTH], value[:MAX_VALUE_LENGTH]))
            return True

    def contains(self, key: str, value: str) -> bool:
        """Return True if exactly this pair is stored."""
        with self._lock:
            return (key, value) in self._pairs

    def delete(self, key: str, value: str) -> bool:
        """Remove the first occurrence of the pair; return whether one was found."""
        with self._lock:
            try:
                self._pairs.remove((key, value))
            except ValueError:
                return False
            return True

    def pairs(self) -> list[tuple[str, str]]:
        """Return a snapshot of the stored pairs, in insertion order."""
        with self._lock:
            return list(self._pairs)

    def __len__(self) -> int:
        with self._lock:
            return len(self._pairs)

    def render_html(self, html: str) -> str:
        """Return ``html`` followed by a list showing every stored pair."""
        return html + _render_list(self.pairs())


def _render_list(pairs: Iterable[tuple[str, str]]) -> str:
    items = "".join(f"<li>{key}: {value}</li>" for key, value in pairs)
    return f"{SAVED_PAIRS_HEADING}<ul>{items}</ul>"