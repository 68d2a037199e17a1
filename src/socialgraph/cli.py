"""``socialgraph`` entry point: global flags, then one query subcommand."""

from __future__ import annotations

from pathlib import Path

import click

from socialgraph import __version__
from socialgraph.commands import register_commands
from socialgraph.commands._context import AppContext
from socialgraph.config.settings import SocialGraphSettings


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="socialgraph")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the answer.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and per-query timing.")
@click.option("--log-json", is_flag=True, help="Write log lines to stderr as JSON.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read this TOML file instead of searching for socialgraph.toml.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, **flags: bool) -> None:
    """Shortest friendship chains between members of a social network."""
    ctx.obj = AppContext(SocialGraphSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
