"""CLI entry point for lifo. Uses Click for argument parsing."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from lifo.config import StackConfig, load_config
from lifo.errors import InvalidArgumentError
from lifo.factory import STRATEGIES


@click.command()
@click.option(
    "--strategy",
    type=click.Choice(list(STRATEGIES)),
    default=None,
    help="Storage strategy for every demo section (default: mixed)",
)
@click.option(
    "--capacity",
    type=click.IntRange(min=1),
    default=None,
    help="Initial capacity for array stacks",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to a JSON stack config (default: ~/.lifo/stack.json)",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="error",
)
def main(strategy, capacity, config_path, log_level):
    """Demonstrate the array and linked stack implementations."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = load_config(config_path)
    except InvalidArgumentError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    from lifo.demo import run_demo

    run_demo(
        StackConfig(
            strategy=strategy or config.strategy,
            initial_capacity=capacity or config.initial_capacity,
        )
    )


if __name__ == "__main__":
    main()
