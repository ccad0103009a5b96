"""Stack protocol shared by every storage strategy."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")

EMPTY_MARKER = "[]"


@runtime_checkable
class Stack(Protocol[T]):
    """Interface for last-in-first-out containers.

    Implementations differ only in how they store elements. Every observable
    result (size, top element, display string) must be the same for the same
    sequence of calls.
    """

    def push(self, element: T) -> None:
        """Place element on top of the stack."""
        ...

    def pop(self) -> T:
        """Remove and return the top element.

        Raises:
            EmptyCollectionError: If the stack is empty.
        """
        ...

    def peek(self) -> T:
        """Return the top element without removing it.

        Raises:
            EmptyCollectionError: If the stack is empty.
        """
        ...

    def is_empty(self) -> bool:
        """Return True if the stack holds no elements."""
        ...

    def size(self) -> int:
        """Return the number of elements on the stack."""
        ...

    def clear(self) -> None:
        """Remove every element."""
        ...


def format_items(items: Iterable[object]) -> str:
    """Render elements (top first) as ``[a, b, c]``, or ``[]`` when empty."""
    rendered = [str(item) for item in items]
    if not rendered:
        return EMPTY_MARKER
    return f"[{', '.join(rendered)}]"
