"""Command: convert a markdown document to HTML and extract its front matter."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mdconv.commands._base import MdCommand

if TYPE_CHECKING:
    from mdconv.commands._context import AppContext


@click.command(
    cls=MdCommand,
    examples="""\
  mdconv convert post.md
  mdconv convert post.md -o post.html
  mdconv convert hello.md --content-dir content --public-dir public
  mdconv convert post.md --front-matter-output meta/post.yaml --format yaml --mkdirs
  mdconv --json convert post.md""",
)
@click.argument("input_file")
@click.option(
    "-o", "--output", default=None, help="HTML output path (relative to the public directory)."
)
@click.option(
    "--front-matter-output",
    default=None,
    help="Front matter output path (relative to the public directory).",
)
@click.option("--content-dir", default=None, help="Directory relative input paths are read from.")
@click.option("--public-dir", default=None, help="Directory relative output paths are written to.")
@click.option(
    "--format",
    "fm_format",
    type=click.Choice(["json", "yaml"]),
    default=None,
    help="Front matter serialization format.",
)
@click.option("--mkdirs", is_flag=True, help="Create missing output directories.")
@click.pass_obj
def convert(
    app: AppContext,
    input_file: str,
    output: str | None,
    front_matter_output: str | None,
    content_dir: str | None,
    public_dir: str | None,
    fm_format: str | None,
    mkdirs: bool,
) -> None:
    """Convert INPUT_FILE to HTML and write its front matter alongside."""
    from mdconv.services.convert import ConvertService

    settings = app.settings.with_overrides(
        paths={
            "content_dir": content_dir,
            "public_dir": public_dir,
            "create_parents": True if mkdirs else None,
        },
        front_matter={"format": fm_format},
    )
    app.emit(
        ConvertService(settings).convert(
            input_file,
            output_path=output,
            front_matter_path=front_matter_output,
        )
    )
