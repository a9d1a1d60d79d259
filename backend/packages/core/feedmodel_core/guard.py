"""
Argument guards.

Programmer errors (missing method arguments) surface immediately as ValueError.
"""

from typing import Any


def ensure_not_none(value: Any, name: str) -> None:
    """Raise ValueError when a required argument is None."""
    if value is None:
        raise ValueError(f"{name} must not be None")


def ensure_not_empty(value: str | None, name: str) -> None:
    """Raise ValueError when a required string argument is None or blank."""
    ensure_not_none(value, name)
    if not value.strip():
        raise ValueError(f"{name} must not be empty")
