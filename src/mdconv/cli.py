"""Root CLI group for mdconv with global flags and command registration."""

from __future__ import annotations

import click

from mdconv import __version__
from mdconv.commands import register_commands
from mdconv.commands._base import MdGroup
from mdconv.commands._context import AppContext
from mdconv.config.settings import MdconvSettings


@click.group(
    cls=MdGroup,
    invoke_without_command=True,
    examples="""\
  mdconv convert post.md -o post.html
  mdconv -v convert post.md
  mdconv --json frontmatter post.md
  mdconv -c site/mdconv.toml convert index.md""",
)
@click.version_option(version=__version__, prog_name="mdconv")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """mdconv: Markdown front matter extraction and HTML conversion."""
    ctx.ensure_object(dict)
    settings = MdconvSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)


def main() -> None:
    """Console-script entry point."""
    cli()


if __name__ == "__main__":
    main()
