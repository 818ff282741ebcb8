"""Subcommand modules for mdconv.

Provides register_commands() which uses deferred imports to keep
``mdconv --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from mdconv.commands.convert import convert
    from mdconv.commands.frontmatter import frontmatter

    cli.add_command(convert)
    cli.add_command(frontmatter)
