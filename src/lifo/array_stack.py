"""Stack backed by a growable array buffer."""

from __future__ import annotations

import logging
import math
from typing import Generic, TypeVar

from lifo.errors import EmptyCollectionError, InvalidArgumentError
from lifo.stack import format_items

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_CAPACITY = 10
GROWTH_FACTOR = 1.5


class ArrayStack(Generic[T]):
    """Keeps elements in a preallocated list, top at index ``size - 1``.

    The buffer grows by ``GROWTH_FACTOR`` when a push finds it full and
    never shrinks. Vacated slots are reset to None so popped elements
    are not kept alive by the buffer.
    """

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY) -> None:
        if isinstance(initial_capacity, bool) or not isinstance(initial_capacity, int):
            raise InvalidArgumentError(
                f"Initial capacity must be an integer, got {type(initial_capacity).__name__}"
            )
        if initial_capacity <= 0:
            raise InvalidArgumentError(
                f"Initial capacity must be positive, got {initial_capacity}"
            )
        self._elements: list[T | None] = [None] * initial_capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._elements)

    def push(self, element: T) -> None:
        if self._size == len(self._elements):
            self._grow()
        self._elements[self._size] = element
        self._size += 1

    def pop(self) -> T:
        if self.is_empty():
            raise EmptyCollectionError("pop")
        self._size -= 1
        element = self._elements[self._size]
        self._elements[self._size] = None
        return element  # type: ignore[return-value]

    def peek(self) -> T:
        if self.is_empty():
            raise EmptyCollectionError("peek")
        return self._elements[self._size - 1]  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def clear(self) -> None:
        for i in range(self._size):
            self._elements[i] = None
        self._size = 0

    def _grow(self) -> None:
        old_capacity = len(self._elements)
        # floor(1 * 1.5) == 1, so always add at least one slot
        new_capacity = max(math.floor(old_capacity * GROWTH_FACTOR), old_capacity + 1)
        buffer: list[T | None] = [None] * new_capacity
        buffer[: self._size] = self._elements[: self._size]
        self._elements = buffer
        logger.debug("Grew array stack buffer from %d to %d slots", old_capacity, new_capacity)

    def _top_down(self) -> list[T]:
        return [self._elements[i] for i in range(self._size - 1, -1, -1)]  # type: ignore[misc]

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __str__(self) -> str:
        return format_items(self._top_down())

    def __repr__(self) -> str:
        return f"ArrayStack({self._top_down()!r})"
