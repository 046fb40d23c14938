"""Equality rules deciding whether a manifest field holds its expected value."""

from __future__ import annotations

from .expectations import OBJECT_FIELD_INFIXES, STRING_FIELD_SUFFIXES
from .models import EntryValue, MappedEntries, SingleEntry


def is_valid(kind: str, actual: object, expected: object) -> bool:
    """Return whether ``actual`` equals ``expected`` for a field of ``kind``."""
    if kind in STRING_FIELD_SUFFIXES:
        return isinstance(actual, str) and actual == expected
    if kind in OBJECT_FIELD_INFIXES:
        if isinstance(actual, SingleEntry):
            return False
        if isinstance(actual, MappedEntries) and isinstance(expected, MappedEntries):
            return entries_equal(actual, expected)
        return False
    message = f"Unknown field kind {kind!r}."
    raise ValueError(message)


def entries_equal(left: EntryValue, right: EntryValue) -> bool:
    """Compare two entry values structurally, ignoring key order."""
    if isinstance(left, MappedEntries) and isinstance(right, MappedEntries):
        if left.entries.keys() != right.entries.keys():
            return False
        return all(
            entries_equal(value, right.entries[key])
            for key, value in left.entries.items()
        )
    if isinstance(left, MappedEntries) or isinstance(right, MappedEntries):
        return False
    # bool is an int subclass; True must not equal 1 here
    return type(left) is type(right) and left == right
