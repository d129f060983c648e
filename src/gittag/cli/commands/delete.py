import click

from gittag.cli.error_boundary import tag_error_boundary
from gittag.context import GitTagContext
from gittag.manager import ALL_TAGS_PATTERN
from gittag.output import user_output


def _check_scope(local_only: bool, remote_only: bool) -> None:
    if local_only and remote_only:
        raise click.UsageError("--local-only and --remote-only are mutually exclusive")


@click.command("delete")
@click.argument("tag_name")
@click.option("--local-only", is_flag=True, help="Only delete the local tag")
@click.option("--remote-only", is_flag=True, help="Only delete the tag on the remote")
@click.pass_obj
def delete_cmd(ctx: GitTagContext, tag_name: str, local_only: bool, remote_only: bool) -> None:
    """Delete a tag locally and then on the remote."""
    _check_scope(local_only, remote_only)
    manager = ctx.tag_manager
    with tag_error_boundary():
        if local_only:
            manager.delete_local(tag_name)
        elif remote_only:
            manager.delete_remote(tag_name)
        else:
            manager.delete_tag(tag_name)
    user_output(f"Deleted tag {click.style(tag_name, fg='yellow')}")


@click.command("prune")
@click.argument("pattern")
@click.option("--local-only", is_flag=True, help="Only delete local tags")
@click.option("--remote-only", is_flag=True, help="Only delete tags on the remote")
@click.pass_obj
def prune_cmd(ctx: GitTagContext, pattern: str, local_only: bool, remote_only: bool) -> None:
    """Delete every tag matching PATTERN (e.g. 'v1.*').

    Matching is done against local tags, so remote tags are deleted before
    the local ones. A pattern that matches nothing is not an error.
    """
    _check_scope(local_only, remote_only)
    manager = ctx.tag_manager
    with tag_error_boundary():
        if not local_only:
            manager.delete_remote_all(pattern)
        if not remote_only:
            manager.delete_local_all(pattern)
    user_output(f"Deleted tags matching {click.style(pattern, fg='yellow')}")


@click.command("purge")
@click.option("--yes", is_flag=True, help="Confirm deletion of every tag")
@click.pass_obj
def purge_cmd(ctx: GitTagContext, yes: bool) -> None:
    """Delete all local tags, then remote tags still listed locally.

    Local tags are deleted first, so remote tags are only removed if they
    are still present locally. Use 'gittag prune "*"' to remove remote tags
    as well.
    """
    if not yes:
        raise click.ClickException("Refusing to delete all tags without --yes")
    manager = ctx.tag_manager
    with tag_error_boundary():
        if ctx.dry_run:
            # Dry-run deletions leave the local list intact, so the remote
            # pass would resolve tags that a real run never reaches
            manager.delete_local_all(ALL_TAGS_PATTERN)
        else:
            manager.delete_all_tags()

    if ctx.dry_run:
        user_output("[DRY RUN] No remote tags would be deleted: no local tags remain to resolve")
    else:
        user_output("Deleted all tags")
