"""Base Click command for itemctl subcommands.

Item operations are usually chained (``split`` into ``sort`` into
``distinct``) through ``--json`` and ``-a -``, and those pipelines read
badly inside ``--help``.  Each subcommand therefore carries its pipelines
in an ``examples`` string that ``--examples`` prints on demand.
"""

from __future__ import annotations

from typing import Any

import click


class ItemCommand(click.Command):
    """Command that accepts an ``examples`` string and an ``--examples`` flag.

    Used as ``cls=ItemCommand`` by every command in :mod:`itemctl.commands`.
    """

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show example invocations and pipelines.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)
