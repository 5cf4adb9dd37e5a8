"""Error hierarchy for item set operations.

Every error carries a stable ``code`` that the service layer copies into
:class:`~itemctl.services.result.ServiceError`.
"""

from __future__ import annotations

from typing import Any


class ItemSetError(Exception):
    """Base class for all operation errors."""

    code = "ITEMSET_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class MissingInputError(ItemSetError):
    """A required input was not supplied."""

    code = "MISSING_INPUT"

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} is required", input=name)
        self.name = name


class IndexOutOfRangeError(ItemSetError):
    """A position falls outside the bounds of a collection."""

    code = "INDEX_OUT_OF_RANGE"

    def __init__(self, position: int, size: int) -> None:
        if size == 0:
            message = f"Position: {position} is outside the empty item collection"
        else:
            message = f"Position: {position} is outside the size of the item collection: {size}"
        super().__init__(message, position=position, size=size)
        self.position = position
        self.size = size


class UnsupportedOperationError(ItemSetError):
    """The requested operation name is not one of the known operations."""

    code = "UNSUPPORTED_OPERATION"

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid operation passed: {name}", operation=name)
        self.name = name


class InvalidItemsError(ItemSetError):
    """A serialized item collection could not be parsed."""

    code = "INVALID_INPUT"
