"""A buffer that pulls items from an iterator only when asked to."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Sequence
from typing import Generic, Optional, Tuple, TypeVar

T = TypeVar("T")

SizeHint = Tuple[int, Optional[int]]


class LazyBuffer(Generic[T]):
    """Holds the items taken so far from an iterator and takes more on demand.

    Once the underlying iterator is exhausted it is never advanced again.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._it = iter(iterable)
        self._buffer: list[T] = []
        self._done = False

    def __len__(self) -> int:
        return len(self._buffer)

    def __getitem__(self, index):
        return self._buffer[index]

    def size_hint(self) -> SizeHint:
        """Bounds on the buffered items plus those still to come; upper is None if unknown."""
        buffered = len(self._buffer)
        if self._done:
            return buffered, buffered
        total = buffered + operator.length_hint(self._it, 0)
        known = hasattr(type(self._it), "__length_hint__") or hasattr(type(self._it), "__len__")
        return total, total if known else None

    def count(self) -> int:
        """Consume the rest of the iterator and return the total number of items."""
        remaining = 0 if self._done else sum(1 for _ in self._it)
        self._done = True
        return len(self._buffer) + remaining

    def get_next(self) -> bool:
        """Take one more item into the buffer; return whether one was available."""
        if self._done:
            return False
        try:
            self._buffer.append(next(self._it))
        except StopIteration:
            self._done = True
            return False
        return True

    def prefill(self, length: int) -> None:
        """Take items until the buffer holds ``length`` of them or the input ends."""
        while len(self._buffer) < length and self.get_next():
            pass

    def get_at(self, indices: Iterable[int]) -> list[T]:
        """Return the buffered items at the given positions, in that order."""
        return [self._buffer[i] for i in indices]

    def get_array(self, indices: Sequence[int]) -> tuple[T, ...]:
        """Like :meth:`get_at`, but returns a tuple."""
        return tuple(self._buffer[i] for i in indices)