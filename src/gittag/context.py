"""Dependency wiring for the gittag CLI."""

import logging
from dataclasses import dataclass
from pathlib import Path

from gittag.config import GitTagConfig, load_config
from gittag.gateway.tag_ops.abc import GitTagOps
from gittag.gateway.tag_ops.dry_run import DryRunGitTagOps
from gittag.gateway.tag_ops.printing import PrintingGitTagOps
from gittag.gateway.tag_ops.real import RealGitTagOps
from gittag.manager import TagManager
from gittag.subprocess_utils import run_subprocess_with_context

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GitTagContext:
    """Immutable context holding all dependencies for gittag commands.

    Created once at CLI entry point and threaded through commands via
    click's ctx.obj. Tests build one directly around FakeGitTagOps.
    """

    tag_ops: GitTagOps
    repo_root: Path
    config: GitTagConfig
    dry_run: bool

    @property
    def tag_manager(self) -> TagManager:
        return TagManager(self.tag_ops, self.repo_root, self.config)


def find_repo_root(start: Path) -> Path:
    """Return the top level of the git repository containing start.

    Falls back to start itself when it is not inside a repository (or git
    is unavailable), so commands still run there and report git's error.
    """
    try:
        result = run_subprocess_with_context(
            cmd=["git", "rev-parse", "--show-toplevel"],
            operation_context=f"find repository root for '{start}'",
            cwd=start,
        )
    except RuntimeError as e:
        logger.debug("Using %s as repository root: %s", start, e)
        return start
    return Path(result.stdout.strip())


def create_context(*, cwd: Path, dry_run: bool, verbose: bool) -> GitTagContext:
    """Create production context with real implementations.

    Args:
        cwd: Directory gittag was started in (or given with -C); the
             repository root is resolved from it
        dry_run: If True, wrap the tag gateway so mutations are printed
                 instead of executed
        verbose: If True, print each git command before it runs

    Returns:
        GitTagContext with RealGitTagOps, wrapped as requested

    Example:
        >>> ctx = create_context(cwd=Path.cwd(), dry_run=False, verbose=False)
        >>> ctx.tag_manager.find_many("v1.*")
    """
    repo_root = find_repo_root(cwd)

    tag_ops: GitTagOps = RealGitTagOps()
    if dry_run:
        tag_ops = DryRunGitTagOps(tag_ops)
    if verbose:
        tag_ops = PrintingGitTagOps(tag_ops, script_mode=False, dry_run=dry_run)

    return GitTagContext(
        tag_ops=tag_ops,
        repo_root=repo_root,
        config=load_config(repo_root),
        dry_run=dry_run,
    )
