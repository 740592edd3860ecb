"""Helpers for ordered collections that must stay free of duplicates."""

from __future__ import annotations

from typing import MutableSequence, TypeVar

T = TypeVar("T")


def push_back_uniquely(collection: MutableSequence[T], value: T) -> bool:
    """Append ``value`` unless an equal element is already present.

    Works for lists of strings as well as lists of string pairs. Returns True
    when the value was appended.
    """
    if value in collection:
        return False
    collection.append(value)
    return True
