"""Shared Click parameter types and option decorators for item inputs."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click

from itemctl.domain.errors import InvalidItemsError
from itemctl.domain.items import ItemCollection
from itemctl.infrastructure.item_files import read_collection

_F = TypeVar("_F", bound=Callable[..., Any])


class ItemCollectionType(click.ParamType):
    """A JSON item collection read from a file path, or ``-`` for stdin."""

    name = "items_file"

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> ItemCollection:
        if isinstance(value, ItemCollection):
            return value
        try:
            with click.open_file(value, "r", encoding="utf-8") as stream:
                return read_collection(stream)
        except OSError as exc:
            self.fail(f"cannot read {value!r}: {exc.strerror}", param, ctx)
        except InvalidItemsError as exc:
            self.fail(exc.message, param, ctx)


ITEM_COLLECTION = ItemCollectionType()


def items1_option(func: _F) -> _F:
    return click.option(
        "-a",
        "--items1",
        type=ITEM_COLLECTION,
        default=None,
        help="First item collection (JSON file, '-' for stdin).",
    )(func)


def items2_option(func: _F) -> _F:
    return click.option(
        "-b",
        "--items2",
        type=ITEM_COLLECTION,
        default=None,
        help="Second item collection (JSON file, '-' for stdin).",
    )(func)
