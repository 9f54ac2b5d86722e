"""Sibling ordering: case-insensitive names with a case-sensitive tiebreak."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, TypeVar


class _Named(Protocol):
    name: str


NamedT = TypeVar("NamedT", bound=_Named)


def name_sort_key(name: str) -> tuple[str, str]:
    """Key placing ``Cat.png`` before ``cat.png`` and both before ``Dog.png``."""
    return (name.lower(), name)


def compare_names(left: str, right: str) -> int:
    """Three-way comparison of two entry names.

    Names compare case-insensitively first. When the lowered forms are equal
    the original strings are compared by code point, so the uppercase variant
    sorts first.
    """
    left_key = name_sort_key(left)
    right_key = name_sort_key(right)
    if left_key < right_key:
        return -1
    if left_key > right_key:
        return 1
    return 0


def sort_names(names: Iterable[str]) -> list[str]:
    return sorted(names, key=name_sort_key)


def sort_entries(entries: Iterable[NamedT]) -> list[NamedT]:
    """Return entries ordered by their ``name`` attribute."""
    return sorted(entries, key=lambda entry: name_sort_key(entry.name))


__all__ = [
    "name_sort_key",
    "compare_names",
    "sort_names",
    "sort_entries",
]
