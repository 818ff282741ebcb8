"""Click base classes that add an ``--examples`` flag to mdconv commands.

``--help`` stays short; ``mdconv convert --examples`` prints the worked
invocations passed as ``examples=`` and exits 0.
"""

from __future__ import annotations

from typing import Any

import click


def _examples_option(examples: str) -> click.Option:
    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value and not ctx.resilient_parsing:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{examples}")
            ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples and exit.",
    )


class _ExamplesMixin:
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        if examples:
            self.params.append(_examples_option(examples))  # type: ignore[attr-defined]


class MdCommand(_ExamplesMixin, click.Command):
    """A leaf command (``convert``, ``frontmatter``)."""


class MdGroup(_ExamplesMixin, click.Group):
    """The root ``mdconv`` group."""
