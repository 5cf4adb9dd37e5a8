"""Single-collection commands: ordering, position, counting, dedup."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from itemctl.commands._base import ItemCommand
from itemctl.commands._params import items1_option

if TYPE_CHECKING:
    from itemctl.commands._context import AppContext
    from itemctl.domain.items import ItemCollection


@click.command(
    cls=ItemCommand,
    examples="""\
  itemctl sort -a files.json
  itemctl --quiet sort -a - < files.json
  itemctl --json sort -a files.json | itemctl count -a -""",
)
@items1_option
@click.pass_obj
def sort(app: AppContext, items1: ItemCollection | None) -> None:
    """Sort items by identity (ordinal, stable)."""
    app.emit(app.service.sort(items1))


@click.command(
    "get-item",
    cls=ItemCommand,
    examples="""\
  itemctl get-item -a files.json --position 2
  itemctl --quiet get-item -a files.json -p 0""",
)
@items1_option
@click.option("-p", "--position", type=int, default=None, help="Zero-based position.")
@click.pass_obj
def get_item(app: AppContext, items1: ItemCollection | None, position: int | None) -> None:
    """Get the item at a zero-based position."""
    app.emit(app.service.get_item(items1, position))


@click.command(
    "get-last-item",
    cls=ItemCommand,
    examples="""\
  itemctl get-last-item -a files.json""",
)
@items1_option
@click.pass_obj
def get_last_item(app: AppContext, items1: ItemCollection | None) -> None:
    """Get the final item of a collection."""
    app.emit(app.service.get_last_item(items1))


@click.command(
    cls=ItemCommand,
    examples="""\
  itemctl count -a files.json
  itemctl --quiet count -a -""",
)
@items1_option
@click.pass_obj
def count(app: AppContext, items1: ItemCollection | None) -> None:
    """Count the items in a collection."""
    app.emit(app.service.get_item_count(items1))


@click.command(
    "remove-duplicate-files",
    cls=ItemCommand,
    examples="""\
  itemctl remove-duplicate-files -a copy-list.json
  itemctl --json remove-duplicate-files -a copy-list.json""",
)
@items1_option
@click.pass_obj
def remove_duplicate_files(app: AppContext, items1: ItemCollection | None) -> None:
    """Keep only the first item for each file name."""
    app.emit(app.service.remove_duplicate_files(items1))
