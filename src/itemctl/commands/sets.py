"""Two-collection commands: common and distinct items by identity."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from itemctl.commands._base import ItemCommand
from itemctl.commands._params import items1_option, items2_option

if TYPE_CHECKING:
    from itemctl.commands._context import AppContext
    from itemctl.domain.items import ItemCollection


@click.command(
    cls=ItemCommand,
    examples="""\
  itemctl common -a before.json -b after.json
  itemctl --quiet common -a before.json -b after.json""",
)
@items1_option
@items2_option
@click.pass_obj
def common(
    app: AppContext,
    items1: ItemCollection | None,
    items2: ItemCollection | None,
) -> None:
    """Items of the first collection whose identity is in the second."""
    app.emit(app.service.get_common_items(items1, items2))


@click.command(
    cls=ItemCommand,
    examples="""\
  itemctl distinct -a before.json -b after.json
  itemctl --json distinct -a before.json -b after.json""",
)
@items1_option
@items2_option
@click.pass_obj
def distinct(
    app: AppContext,
    items1: ItemCollection | None,
    items2: ItemCollection | None,
) -> None:
    """Items found in only one of the two collections."""
    app.emit(app.service.get_distinct_items(items1, items2))
