"""Generic dispatch: run any operation by its build-script name."""

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
  itemctl run Sort -a files.json
  itemctl run GetItem -a files.json --position 1
  itemctl run GetDistinctItems -a before.json -b after.json
  itemctl run StringToItemCol --item-string "a;b;c" --separator ";"
  itemctl run Escape --in-string "50%"
  itemctl run get-current-directory --project-file build/app.proj""",
)
@click.argument("operation")
@items1_option
@items2_option
@click.option("-p", "--position", type=int, default=None, help="Position for GetItem.")
@click.option("--item-string", default=None, help="Input for StringToItemCollection.")
@click.option("-s", "--separator", default=None, help="Separator for StringToItemCollection.")
@click.option("--in-string", default=None, help="Input for Escape.")
@click.option("--project-file", default=None, help="Input for GetCurrentDirectory.")
@click.pass_obj
def run(
    app: AppContext,
    operation: str,
    items1: ItemCollection | None,
    items2: ItemCollection | None,
    position: int | None,
    item_string: str | None,
    separator: str | None,
    in_string: str | None,
    project_file: str | None,
) -> None:
    """Run OPERATION (e.g. GetCommonItems) with the inputs it requires."""
    app.emit(
        app.service.run(
            operation,
            items1=items1,
            items2=items2,
            position=position,
            item_string=item_string,
            separator=separator,
            in_string=in_string,
            project_file=project_file,
        )
    )
