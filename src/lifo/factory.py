"""Build stacks by strategy name."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Literal

from lifo.array_stack import DEFAULT_CAPACITY, ArrayStack
from lifo.errors import InvalidArgumentError
from lifo.linked_stack import LinkedStack
from lifo.stack import Stack

logger = logging.getLogger(__name__)

StackStrategy = Literal["array", "linked"]

STRATEGIES: tuple[StackStrategy, ...] = ("array", "linked")


def _create_array(initial_capacity: int | None) -> Stack[Any]:
    return ArrayStack(DEFAULT_CAPACITY if initial_capacity is None else initial_capacity)


def _create_linked(initial_capacity: int | None) -> Stack[Any]:
    if initial_capacity is not None:
        logger.debug("Linked stack has no capacity, ignoring %r", initial_capacity)
    return LinkedStack()


_builders: dict[str, Callable[[int | None], Stack[Any]]] = {
    "array": _create_array,
    "linked": _create_linked,
}


def create_stack(strategy: StackStrategy = "array", initial_capacity: int | None = None) -> Stack[Any]:
    """Create an empty stack using the named storage strategy.

    Args:
        strategy: One of ``STRATEGIES``.
        initial_capacity: Buffer size for the array strategy. Ignored by
            the linked strategy.

    Raises:
        InvalidArgumentError: If the strategy is unknown or the capacity
            is not positive.
    """
    builder = _builders.get(strategy)
    if builder is None:
        raise InvalidArgumentError(
            f"Unknown stack strategy '{strategy}', expected one of: {', '.join(STRATEGIES)}"
        )
    return builder(initial_capacity)
