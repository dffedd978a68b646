"""
Bounded history cache addressed by recency.

The RingBuffer keeps the most recent rendered messages of a Logger. Two
monotonically increasing cursors track the live window: ``start`` is the
position just before the oldest live entry and ``end`` the position the next
push will use, so ``end - start - 1`` entries are live. Entries are keyed by
their cursor position, so memory follows occupancy rather than capacity.

Example:
    >>> ring = RingBuffer(capacity=2)
    >>> for msg in ("a", "b", "c"): ring.push(msg)
    >>> len(ring), ring.get(1), ring.get(2), ring.get(3)
    (2, 'c', 'b', None)
"""
from __future__ import annotations
from typing import Iterator

class RingBuffer:
    """Bounded FIFO of strings with recency-indexed reads.

    Attributes:
        start: Cursor just before the oldest live entry
        end: Cursor of the next write
    """

    def __init__(self, capacity: int = 1):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._capacity = int(capacity)
        self._slots: dict[int, str] = {}
        self.start = 0
        self.end = 1

    @property
    def capacity(self) -> int:
        return self._capacity

    @capacity.setter
    def capacity(self, value: int) -> None:
        value = int(value)
        if value < 1:
            raise ValueError(f"capacity must be >= 1, got {value}")
        self._capacity = value
        self._evict_to(value)

    def push(self, message: str) -> None:
        self._slots[self.end] = message
        self.end += 1
        self._evict_to(self._capacity)

    def get(self, k: int) -> str | None:
        """Return the k-th most recent entry (1 = newest), or None if not live."""
        if k < 1:
            return None
        return self._slots.get(self.end - k)

    def snapshot(self) -> list[str]:
        """Live entries, newest first."""
        return [self._slots[pos] for pos in range(self.end - 1, self.start, -1)]

    def clear(self) -> None:
        self._evict_to(0)

    def _evict_to(self, limit: int) -> None:
        while self.end - self.start - 1 > limit:
            self.start += 1
            self._slots.pop(self.start, None)

    def __len__(self) -> int:
        return self.end - self.start - 1

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"RingBuffer(capacity={self._capacity}, size={len(self)})"
