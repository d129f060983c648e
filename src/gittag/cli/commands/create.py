import click

from gittag.cli.error_boundary import tag_error_boundary
from gittag.context import GitTagContext
from gittag.output import user_output


@click.command("create")
@click.argument("tag_name")
@click.option("-m", "--message", default=None, help="Tag annotation (default: chore(release): TAG)")
@click.option("--local-only", is_flag=True, help="Create the tag without pushing it")
@click.pass_obj
def create_cmd(ctx: GitTagContext, tag_name: str, message: str | None, local_only: bool) -> None:
    """Create an annotated tag and push it to the remote.

    If the push fails, the local tag is kept.
    """
    manager = ctx.tag_manager
    with tag_error_boundary():
        if local_only:
            manager.create_local(tag_name, message)
        else:
            manager.create_tag(tag_name, message)

    tag_text = click.style(tag_name, fg="green")
    if local_only:
        user_output(f"Created tag {tag_text}")
    else:
        user_output(f"Created tag {tag_text} and pushed it to {manager.remote}")


@click.command("push")
@click.argument("tag_name")
@click.pass_obj
def push_cmd(ctx: GitTagContext, tag_name: str) -> None:
    """Push an existing local tag to the remote."""
    manager = ctx.tag_manager
    with tag_error_boundary():
        manager.create_remote(tag_name)
    user_output(f"Pushed tag {click.style(tag_name, fg='green')} to {manager.remote}")
