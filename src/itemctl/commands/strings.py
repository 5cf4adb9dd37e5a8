"""String and path commands: split, escape, current-directory."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from itemctl.commands._base import ItemCommand

if TYPE_CHECKING:
    from itemctl.commands._context import AppContext


@click.command(
    cls=ItemCommand,
    examples="""\
  itemctl split "how,how,are,you" --separator ,
  itemctl --quiet split "a.cs;b.cs;c.cs"
  itemctl --json split "a.cs;b.cs" | itemctl sort -a -""",
)
@click.argument("item_string", required=False)
@click.option(
    "-s",
    "--separator",
    default=None,
    help="Literal separator. Defaults to [items] separator from itemctl.toml (';').",
)
@click.pass_obj
def split(app: AppContext, item_string: str | None, separator: str | None) -> None:
    """Convert a delimited string into an item collection."""
    if separator is None:
        separator = app.settings.items.separator
    app.emit(app.service.string_to_item_collection(item_string, separator))


@click.command(
    cls=ItemCommand,
    examples="""\
  itemctl escape "hello how;are *you"
  itemctl escape --unescape 'hello how%3Bare %2Ayou'""",
)
@click.argument("in_string", required=False)
@click.option("--unescape", "reverse", is_flag=True, help="Decode %XX sequences instead.")
@click.pass_obj
def escape(app: AppContext, in_string: str | None, reverse: bool) -> None:
    """Escape build-engine special characters as %XX."""
    app.emit(app.service.escape(in_string, reverse=reverse))


@click.command(
    "current-directory",
    cls=ItemCommand,
    examples="""\
  itemctl current-directory build/app.proj""",
)
@click.argument("project_file", required=False)
@click.pass_obj
def current_directory(app: AppContext, project_file: str | None) -> None:
    """Print the absolute directory containing a project file."""
    app.emit(app.service.get_current_directory(project_file))
