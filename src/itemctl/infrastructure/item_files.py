"""Load item collections from JSON documents.

Accepted shapes:

- a JSON array of entries, each a bare identity string or an
  ``{"identity": ..., "metadata": {...}}`` object;
- an object with an ``items`` array;
- a ``--json`` result from another itemctl command (``data.items``), so
  commands can be chained through a pipe.
"""

from __future__ import annotations

import json
from typing import Any, TextIO

from pydantic import ValidationError

from itemctl.domain.errors import InvalidItemsError
from itemctl.domain.items import ItemCollection


def _extract_entries(document: Any, source: str) -> Any:
    if isinstance(document, list):
        return document
    if isinstance(document, dict):
        if "items" in document:
            return document["items"]
        data = document.get("data")
        if isinstance(data, dict) and "items" in data:
            return data["items"]
    msg = f"{source}: expected a JSON array of items or an object with 'items'"
    raise InvalidItemsError(msg, source=source)


def parse_collection(text: str, *, source: str = "<string>") -> ItemCollection:
    """Parse *text* as a serialized item collection."""
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"{source}: invalid JSON ({exc.msg} at line {exc.lineno})"
        raise InvalidItemsError(msg, source=source) from exc

    entries = _extract_entries(document, source)
    try:
        return ItemCollection.model_validate(entries)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        msg = f"{source}: invalid item at {location or 'root'}: {first['msg']}"
        raise InvalidItemsError(msg, source=source) from exc


def read_collection(stream: TextIO) -> ItemCollection:
    """Read a collection from an open text stream (file or stdin)."""
    source = getattr(stream, "name", "<stream>")
    return parse_collection(stream.read(), source=str(source))

