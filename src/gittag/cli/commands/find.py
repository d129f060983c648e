import click

from gittag.cli.error_boundary import tag_error_boundary
from gittag.context import GitTagContext
from gittag.output import machine_output


@click.command("find")
@click.argument("pattern")
@click.option("-a", "--all", "find_all", is_flag=True, help="Print every matching tag")
@click.pass_obj
def find_cmd(ctx: GitTagContext, pattern: str, find_all: bool) -> None:
    """Print the first local tag matching PATTERN (e.g. 'v1.*').

    Exits with status 1 when nothing matches.
    """
    manager = ctx.tag_manager
    with tag_error_boundary():
        if find_all:
            tags = manager.find_many(pattern)
        else:
            tags = [manager.find_one(pattern)]

    for tag in tags:
        machine_output(tag)
