"""ServiceResult and ServiceError — the contract every operation returns.

INVARIANT: ItemSetService methods never raise ItemSetError; they return a
failed ServiceResult carrying the error code instead.  A failed result
carries no partial output in ``data``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from itemctl.domain.errors import ItemSetError
from itemctl.domain.items import ItemCollection


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: ItemSetError) -> ServiceError:
        return cls(code=exc.code, message=exc.message, detail=dict(exc.detail))


class ServiceResult(BaseModel):
    """Universal return type for all item set operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"get_common_items"``).
        data: Named outputs on success (``items``, ``count``, ...).
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (timing telemetry).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @property
    def items(self) -> ItemCollection | None:
        """The ``items`` output rebuilt as a collection, if present."""
        raw = self.data.get("items")
        if raw is None:
            return None
        return ItemCollection.model_validate(raw)

    @property
    def count(self) -> int | None:
        return self.data.get("count")
