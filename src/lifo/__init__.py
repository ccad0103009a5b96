"""lifo: last-in-first-out stacks with array and linked storage."""

from lifo.array_stack import DEFAULT_CAPACITY, GROWTH_FACTOR, ArrayStack
from lifo.config import StackConfig, config_from_dict, load_config
from lifo.errors import EmptyCollectionError, InvalidArgumentError, StackError
from lifo.factory import STRATEGIES, StackStrategy, create_stack
from lifo.linked_stack import LinkedStack
from lifo.stack import Stack, format_items

__all__ = [
    "DEFAULT_CAPACITY",
    "GROWTH_FACTOR",
    "STRATEGIES",
    "ArrayStack",
    "EmptyCollectionError",
    "InvalidArgumentError",
    "LinkedStack",
    "Stack",
    "StackConfig",
    "StackError",
    "StackStrategy",
    "config_from_dict",
    "create_stack",
    "format_items",
    "load_config",
]
