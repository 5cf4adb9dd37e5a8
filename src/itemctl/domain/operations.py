"""The closed set of operations and the inputs each one takes.

Operation names arrive from build scripts and the CLI in several spellings
(``GetItem``, ``get_item``, ``get-item``).  :meth:`Operation.parse` folds
them onto one enum member or raises :class:`UnsupportedOperationError`.
"""

from __future__ import annotations

import re
from enum import StrEnum

from itemctl.domain.errors import UnsupportedOperationError


class Operation(StrEnum):
    """Every operation the service can dispatch."""

    SORT = "sort"
    GET_ITEM = "get_item"
    GET_LAST_ITEM = "get_last_item"
    GET_COMMON_ITEMS = "get_common_items"
    GET_DISTINCT_ITEMS = "get_distinct_items"
    REMOVE_DUPLICATE_FILES = "remove_duplicate_files"
    STRING_TO_ITEM_COLLECTION = "string_to_item_collection"
    GET_ITEM_COUNT = "get_item_count"
    ESCAPE = "escape"
    GET_CURRENT_DIRECTORY = "get_current_directory"

    @classmethod
    def parse(cls, name: str) -> Operation:
        """Resolve *name* in any supported spelling.

        Examples:
            >>> Operation.parse("GetCommonItems")
            <Operation.GET_COMMON_ITEMS: 'get_common_items'>
            >>> Operation.parse("remove-duplicate-files")
            <Operation.REMOVE_DUPLICATE_FILES: 'remove_duplicate_files'>
        """
        key = _normalize_name(name)
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise UnsupportedOperationError(name) from None

    @property
    def display_name(self) -> str:
        """CamelCase name as written in build scripts."""
        return "".join(part.capitalize() for part in self.value.split("_"))


# Required inputs per operation, in the order they are validated.
REQUIRED_INPUTS: dict[Operation, tuple[str, ...]] = {
    Operation.SORT: ("items1",),
    Operation.GET_ITEM: ("items1", "position"),
    Operation.GET_LAST_ITEM: ("items1",),
    Operation.GET_COMMON_ITEMS: ("items1", "items2"),
    Operation.GET_DISTINCT_ITEMS: ("items1", "items2"),
    Operation.REMOVE_DUPLICATE_FILES: ("items1",),
    Operation.STRING_TO_ITEM_COLLECTION: ("item_string", "separator"),
    Operation.GET_ITEM_COUNT: ("items1",),
    Operation.ESCAPE: ("in_string",),
    Operation.GET_CURRENT_DIRECTORY: ("project_file",),
}

_ALIASES: dict[str, str] = {
    "string_to_item_col": Operation.STRING_TO_ITEM_COLLECTION.value,
}

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def _normalize_name(name: str) -> str:
    """Fold CamelCase, kebab-case, and snake_case onto snake_case."""
    text = _CAMEL_BOUNDARY.sub("_", name.strip())
    return text.replace("-", "_").lower()
