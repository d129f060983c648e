import logging
from pathlib import Path

import click

from gittag.cli.commands.create import create_cmd, push_cmd
from gittag.cli.commands.delete import delete_cmd, prune_cmd, purge_cmd
from gittag.cli.commands.find import find_cmd
from gittag.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gittag")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--dry-run",
    is_flag=True,
    help="Print git commands that change tags instead of running them",
)
@click.option("-v", "--verbose", is_flag=True, help="Print each git command before running it")
@click.option(
    "-C",
    "directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Run as if started in this directory",
)
@click.pass_context
def cli(
    ctx: click.Context, debug: bool, dry_run: bool, verbose: bool, directory: Path | None
) -> None:
    """Create, push, find and delete git tags."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(
            cwd=directory if directory is not None else Path.cwd(),
            dry_run=dry_run,
            verbose=verbose,
        )


cli.add_command(create_cmd)
cli.add_command(push_cmd)
cli.add_command(delete_cmd)
cli.add_command(prune_cmd)
cli.add_command(purge_cmd)
cli.add_command(find_cmd)


def main() -> None:
    """CLI entry point used by the `gittag` console script."""
    cli()
