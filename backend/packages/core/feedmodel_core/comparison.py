"""
Comparison helpers for syndication entities.

Entities compare field by field in a fixed priority order; the first
field that differs decides the result.
"""

from collections.abc import Callable, Sequence
from typing import Any
from urllib.parse import unquote, urlsplit, urlunsplit

from .guard import ensure_not_none


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def first_difference(*results: int) -> int:
    """Return the sign of the first non-zero comparison result, or 0."""
    for result in results:
        if result:
            return _sign(result)
    return 0


def compare_values(first: Any, second: Any) -> int:
    """Compare two orderable values; None sorts before everything else."""
    if first is None and second is None:
        return 0
    if first is None:
        return -1
    if second is None:
        return 1
    return (first > second) - (first < second)


def compare_text(first: str | None, second: str | None) -> int:
    """Case-insensitive ordinal string comparison."""
    return compare_values(
        first.upper() if first is not None else None,
        second.upper() if second is not None else None,
    )


def _uri_key(uri: str) -> str:
    parts = urlsplit(uri)
    return urlunsplit(
        (
            parts.scheme.lower(),
            parts.netloc.lower(),
            unquote(parts.path),
            unquote(parts.query),
            unquote(parts.fragment),
        )
    )


def compare_uri(first: str | None, second: str | None) -> int:
    """Compare two URIs component-wise, ignoring case and percent-escaping."""
    return compare_text(
        _uri_key(first) if first is not None else None,
        _uri_key(second) if second is not None else None,
    )


def compare_optional(first: Any, second: Any) -> int:
    """
    Compare two optional nested entities.

    A present entity ranks above a missing one.
    """
    if first is not None:
        return first.compare_to(second)
    if second is not None:
        return -1
    return 0


def compare_sequence(
    source: Sequence[Any],
    target: Sequence[Any],
    comparer: Callable[[Any, Any], int] | None = None,
) -> int:
    """
    Compare two ordered sequences.

    Length dominates: the shorter sequence ranks lower regardless of content.
    Sequences of equal length are compared position by position.

    Args:
        source: First sequence.
        target: Second sequence.
        comparer: Element comparison; defaults to ``compare_to`` for entities
            and natural ordering otherwise.

    Returns:
        -1, 0 or 1.

    Raises:
        ValueError: If either sequence is None.
    """
    ensure_not_none(source, "source")
    ensure_not_none(target, "target")

    if len(source) > len(target):
        return 1
    if len(source) < len(target):
        return -1

    compare = comparer or _default_comparer
    return first_difference(*(compare(a, b) for a, b in zip(source, target)))


def _default_comparer(first: Any, second: Any) -> int:
    if hasattr(first, "compare_to"):
        return first.compare_to(second)
    return compare_values(first, second)
