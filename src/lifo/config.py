"""Stack configuration. Stored as JSON at ~/.lifo/stack.json by default."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from lifo.errors import InvalidArgumentError
from lifo.factory import STRATEGIES, StackStrategy, create_stack
from lifo.stack import Stack


@dataclass
class StackConfig:
    # None leaves the choice to the caller; create() falls back to "array"
    strategy: StackStrategy | None = None
    initial_capacity: int | None = None

    def __post_init__(self) -> None:
        if self.strategy is not None and self.strategy not in STRATEGIES:
            raise InvalidArgumentError(
                f"Unknown stack strategy '{self.strategy}', expected one of: {', '.join(STRATEGIES)}"
            )
        capacity = self.initial_capacity
        if capacity is not None and (
            isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0
        ):
            raise InvalidArgumentError(f"Initial capacity must be a positive integer, got {capacity!r}")

    def create(self) -> Stack[Any]:
        """Build an empty stack as configured."""
        return create_stack(self.strategy or "array", self.initial_capacity)


def config_from_dict(data: dict) -> StackConfig:
    """Deserialize a StackConfig from a JSON-compatible dict."""
    return StackConfig(
        strategy=data.get("strategy"),
        initial_capacity=data.get("initialCapacity"),
    )


def _get_config_dir() -> Path:
    return Path(os.environ.get("LIFO_CONFIG_DIR", Path.home() / ".lifo"))


def get_default_config_path() -> Path:
    return _get_config_dir() / "stack.json"


def load_config(path: Path | None = None) -> StackConfig:
    """Load configuration from ``path`` or from the default location.

    A missing default file yields the defaults. A missing explicit path,
    an unreadable file, malformed JSON, or invalid values raise
    InvalidArgumentError.
    """
    config_path = path if path is not None else get_default_config_path()
    if not config_path.exists():
        if path is None:
            return StackConfig()
        raise InvalidArgumentError(f"Config file not found: {config_path}")
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InvalidArgumentError(f"Invalid JSON in {config_path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidArgumentError(f"Cannot read config {config_path}: {e}") from e
    if not isinstance(data, dict):
        raise InvalidArgumentError(f"Config in {config_path} must be a JSON object")
    return config_from_dict(data)
