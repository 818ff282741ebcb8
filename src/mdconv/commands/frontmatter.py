"""Command: print the decoded front matter of a markdown document."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mdconv.commands._base import MdCommand

if TYPE_CHECKING:
    from mdconv.commands._context import AppContext


@click.command(
    cls=MdCommand,
    examples="""\
  mdconv frontmatter post.md
  mdconv --json frontmatter hello.md --content-dir content""",
)
@click.argument("input_file")
@click.option("--content-dir", default=None, help="Directory relative input paths are read from.")
@click.pass_obj
def frontmatter(app: AppContext, input_file: str, content_dir: str | None) -> None:
    """Show the front matter of INPUT_FILE without writing any files."""
    from mdconv.services.convert import ConvertService

    settings = app.settings.with_overrides(paths={"content_dir": content_dir})
    app.emit(ConvertService(settings).extract(input_file))
