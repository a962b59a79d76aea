"""Text helpers for turning titles and tags into tokens."""

from __future__ import annotations

from typing import Iterable, List


def split_words(value: str) -> List[str]:
    """Lowercase ``value`` and split it on whitespace."""
    if not value:
        return []
    return value.lower().split()


def lower_tokens(values: Iterable[str]) -> List[str]:
    """Lowercase every entry of ``values`` while keeping order and duplicates."""
    return [value.lower() for value in values]
