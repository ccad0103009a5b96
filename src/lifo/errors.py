"""Error types raised by stack implementations."""

from __future__ import annotations


class StackError(Exception):
    """Base class for all stack errors."""


class EmptyCollectionError(StackError, IndexError):
    """Raised by pop/peek when the stack holds no elements."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} from empty stack")
        self.operation = operation


class InvalidArgumentError(StackError, ValueError):
    """Raised when a stack is constructed or configured with a bad value."""
