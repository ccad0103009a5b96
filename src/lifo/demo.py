"""Console walkthrough of the stack operations."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace
from typing import Any

import click

from lifo.config import StackConfig
from lifo.errors import EmptyCollectionError
from lifo.factory import StackStrategy
from lifo.stack import Stack

logger = logging.getLogger(__name__)

INT_ELEMENTS = (10, 20, 30)
STR_ELEMENTS = ("Python", "Stack", "Implementation")


def _header(title: str) -> None:
    click.echo(f"=== {title} ===")


def _show_state(stack: Stack[Any]) -> None:
    click.echo(f"Stack: {stack}")
    click.echo(f"Size: {stack.size()}")
    click.echo(f"Top: {stack.peek()}")


def demo_push_pop(stack: Stack[Any], elements: Iterable[Any] = INT_ELEMENTS) -> None:
    """Push elements, show the stack, then pop until it is empty."""
    elements = list(elements)
    click.echo(f"Pushing: {', '.join(str(e) for e in elements)}")
    for element in elements:
        stack.push(element)
    if stack.is_empty():
        return
    _show_state(stack)

    click.echo("")
    click.echo("Popping:")
    while not stack.is_empty():
        click.echo(f"Popped: {stack.pop()}")
        click.echo(f"Current stack: {stack}")


def demo_clear(stack: Stack[Any], elements: Iterable[Any] = STR_ELEMENTS) -> None:
    """Push elements, show the stack, then clear it."""
    elements = list(elements)
    click.echo(f"Pushing: {', '.join(str(e) for e in elements)}")
    for element in elements:
        stack.push(element)
    if not stack.is_empty():
        _show_state(stack)

    stack.clear()
    click.echo("")
    click.echo("After clear:")
    click.echo(f"Is empty: {stack.is_empty()}")
    click.echo(f"Size: {stack.size()}")


def demo_errors(stack: Stack[Any]) -> None:
    """Call pop and peek on an empty stack and report the caught errors."""
    stack.clear()
    for name in ("pop", "peek"):
        try:
            getattr(stack, name)()
        except EmptyCollectionError as e:
            logger.warning("Caught expected error from %s(): %s", name, e)
            click.echo(f"Caught exception: {type(e).__name__}")


def run_demo(config: StackConfig | None = None) -> None:
    """Run every demo section.

    Without a configured strategy the push/pop and error sections use the
    array stack and the clear section uses the linked stack. With one,
    every section uses it.
    """
    config = config or StackConfig()

    def make(default: StackStrategy) -> Stack[Any]:
        return replace(config, strategy=config.strategy or default).create()

    sections = (
        ("push/pop", lambda: demo_push_pop(make("array"))),
        ("clear", lambda: demo_clear(make("linked"))),
        ("exceptions", lambda: demo_errors(make("array"))),
    )
    for i, (title, run) in enumerate(sections):
        if i:
            click.echo("")
        _header(f"Demo: {title}")
        logger.debug("Running %s demo", title)
        run()
