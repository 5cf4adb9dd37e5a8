"""Subcommand modules for itemctl.

register_commands() defers imports so ``itemctl --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every standalone command on the root CLI group."""
    from itemctl.commands.collection import (
        count,
        get_item,
        get_last_item,
        remove_duplicate_files,
        sort,
    )
    from itemctl.commands.run import run
    from itemctl.commands.sets import common, distinct
    from itemctl.commands.strings import current_directory, escape, split

    for command in (
        sort,
        get_item,
        get_last_item,
        count,
        remove_duplicate_files,
        common,
        distinct,
        split,
        escape,
        current_directory,
        run,
    ):
        cli.add_command(command)
