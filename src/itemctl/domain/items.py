"""Item and ItemCollection — the data model every operation works on.

An :class:`Item` is matched, ordered, and compared by its ``identity``
only; ``metadata`` rides along untouched.  An :class:`ItemCollection` is an
immutable ordered sequence of items in insertion order.

Serialized form accepts either a bare identity string or an object with
``identity`` and optional ``metadata``::

    ["a.txt", {"identity": "b.txt", "metadata": {"Kind": "doc"}}]
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, overload

from pydantic import BaseModel, Field, RootModel, model_validator


class Item(BaseModel):
    """A build item: an identity string plus string metadata."""

    model_config = {"frozen": True}

    identity: str
    metadata: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _coerce_identity_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"identity": data}
        return data


class ItemCollection(RootModel[tuple[Item, ...]]):
    """Immutable, ordered sequence of items.

    Duplicate identities are allowed; order is insertion order unless an
    operation explicitly re-sorts.
    """

    model_config = {"frozen": True}

    root: tuple[Item, ...] = ()

    @classmethod
    def of(cls, items: Iterable[Item]) -> ItemCollection:
        """Build a collection from already-constructed items."""
        return cls(tuple(items))

    @classmethod
    def from_identities(cls, *identities: str) -> ItemCollection:
        """Build a collection of metadata-free items."""
        return cls(tuple(Item(identity=i) for i in identities))

    def identities(self) -> tuple[str, ...]:
        return tuple(item.identity for item in self.root)

    def to_list(self) -> list[dict[str, Any]]:
        """Serialize to a JSON-compatible list of item dicts."""
        return [item.model_dump(mode="json") for item in self.root]

    def __iter__(self) -> Iterator[Item]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    @overload
    def __getitem__(self, index: int) -> Item: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Item, ...]: ...

    def __getitem__(self, index: int | slice) -> Item | tuple[Item, ...]:
        return self.root[index]
