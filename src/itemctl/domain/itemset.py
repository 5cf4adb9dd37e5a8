"""Collection algorithms over build items.

Pure functions: each validates its required inputs (first-declared first),
builds a fresh :class:`ItemCollection`, and never mutates its arguments.
Matching and ordering always use ``Item.identity``; metadata is copied
through unchanged.

INVARIANT: A ``None`` input is rejected with :class:`MissingInputError`
before any other input is inspected.
"""

from __future__ import annotations

import ntpath
import os
from collections.abc import Iterable
from pathlib import Path
from typing import TypeVar

from itemctl.domain.errors import IndexOutOfRangeError, MissingInputError
from itemctl.domain.items import Item, ItemCollection

_T = TypeVar("_T")


def require(value: _T | None, name: str) -> _T:
    """Return *value*, or raise :class:`MissingInputError` if it is None."""
    if value is None:
        raise MissingInputError(name)
    return value


def require_text(value: str | None, name: str) -> str:
    """Like :func:`require`, but an empty string also counts as missing."""
    if not value:
        raise MissingInputError(name)
    return value


# ── Ordering and position ────────────────────────────────────────────


def sort_items(items1: ItemCollection | None) -> ItemCollection:
    """Sort by ascending ordinal identity, keeping equal identities in input order."""
    items = require(items1, "items1")
    return ItemCollection.of(sorted(items, key=lambda item: item.identity))


def get_item(items1: ItemCollection | None, position: int | None) -> ItemCollection:
    """Singleton collection holding the item at zero-based *position*.

    Negative positions are out of range; they do not count from the end.
    """
    items = require(items1, "items1")
    index = require(position, "position")
    if index < 0 or index > len(items) - 1:
        raise IndexOutOfRangeError(index, len(items))
    return ItemCollection.of([items[index]])


def get_last_item(items1: ItemCollection | None) -> ItemCollection:
    """Singleton collection holding the final item."""
    items = require(items1, "items1")
    if not len(items):
        raise IndexOutOfRangeError(-1, 0)
    return ItemCollection.of([items[len(items) - 1]])


def get_item_count(items1: ItemCollection | None) -> int:
    return len(require(items1, "items1"))


# ── Set operations ───────────────────────────────────────────────────


def _identity_index(items: Iterable[Item]) -> frozenset[str]:
    return frozenset(item.identity for item in items)


def get_common_items(
    items1: ItemCollection | None,
    items2: ItemCollection | None,
) -> ItemCollection:
    """Items of *items1* whose identity appears in *items2*, in *items1* order.

    Duplicates within *items1* are all kept when they match.
    """
    first = require(items1, "items1")
    second = require(items2, "items2")
    in_second = _identity_index(second)
    return ItemCollection.of(item for item in first if item.identity in in_second)


def get_distinct_items(
    items1: ItemCollection | None,
    items2: ItemCollection | None,
) -> ItemCollection:
    """Symmetric difference by identity.

    Unmatched items of *items1* come first, then unmatched items of
    *items2*, each side in its own input order.
    """
    first = require(items1, "items1")
    second = require(items2, "items2")
    in_first = _identity_index(first)
    in_second = _identity_index(second)
    only_first = [item for item in first if item.identity not in in_second]
    only_second = [item for item in second if item.identity not in in_first]
    return ItemCollection.of([*only_first, *only_second])


# ── Derived-key deduplication ────────────────────────────────────────


def file_name(identity: str) -> str:
    """Final path segment of *identity*.

    Both ``/`` and ``\\`` separate segments and a drive prefix is dropped,
    whatever the host platform.  Pure string computation; the filesystem is
    never consulted.

    Examples:
        >>> file_name("C:\\\\a\\\\x.txt")
        'x.txt'
        >>> file_name("src/pkg/mod.py")
        'mod.py'
        >>> file_name("build/")
        ''
    """
    return ntpath.basename(identity)


def remove_duplicate_files(items1: ItemCollection | None) -> ItemCollection:
    """Keep the first item for each distinct file name, in input order.

    Two items with different directories but the same trailing file name
    are duplicates.  Comparison is case-sensitive.
    """
    items = require(items1, "items1")
    seen: set[str] = set()
    kept: list[Item] = []
    for item in items:
        key = file_name(item.identity)
        if key not in seen:
            seen.add(key)
            kept.append(item)
    return ItemCollection.of(kept)


# ── Parsing ──────────────────────────────────────────────────────────


def string_to_items(item_string: str | None, separator: str | None) -> ItemCollection:
    """Split *item_string* on the literal *separator* into metadata-free items.

    Empty segments (leading, trailing, or between consecutive separators)
    are dropped; repeated segments are kept.
    """
    text = require_text(item_string, "item_string")
    sep = require_text(separator, "separator")
    return ItemCollection.from_identities(*(part for part in text.split(sep) if part))


def project_directory(project_file: str | None) -> str:
    """Absolute directory containing *project_file*.

    Relative paths are joined onto the working directory and ``..``
    segments are collapsed lexically.  Symlinks are not followed and the
    file itself need not exist.
    """
    path = Path(os.path.abspath(require_text(project_file, "project_file")))
    return str(path.parent)
