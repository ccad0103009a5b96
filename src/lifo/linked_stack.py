"""Stack backed by a singly linked chain of nodes."""

from __future__ import annotations

from typing import Generic, TypeVar

from lifo.errors import EmptyCollectionError
from lifo.stack import format_items

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("element", "next")

    def __init__(self, element: T, next: _Node[T] | None = None) -> None:
        self.element = element
        self.next = next


class LinkedStack(Generic[T]):
    """Each push allocates one node that links to the previous top.

    Dropping the top reference releases the whole chain, so clear()
    does not walk the nodes.
    """

    def __init__(self) -> None:
        self._top: _Node[T] | None = None
        self._size = 0

    def push(self, element: T) -> None:
        self._top = _Node(element, self._top)
        self._size += 1

    def pop(self) -> T:
        if self._top is None:
            raise EmptyCollectionError("pop")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.element

    def peek(self) -> T:
        if self._top is None:
            raise EmptyCollectionError("peek")
        return self._top.element

    def is_empty(self) -> bool:
        return self._top is None

    def size(self) -> int:
        return self._size

    def clear(self) -> None:
        self._top = None
        self._size = 0

    def _top_down(self) -> list[T]:
        items: list[T] = []
        node = self._top
        while node is not None:
            items.append(node.element)
            node = node.next
        return items

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._top is not None

    def __str__(self) -> str:
        return format_items(self._top_down())

    def __repr__(self) -> str:
        return f"LinkedStack({self._top_down()!r})"
