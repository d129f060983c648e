"""Git tag operations gateway.

This package wraps the git tag sub-commands used by TagManager:
creating, pushing, deleting (locally and remotely) and listing tags.

Import from submodules:
- abc: GitTagOps, parse_tag_listing
- real: RealGitTagOps
- fake: FakeGitTagOps
- dry_run: DryRunGitTagOps
- printing: PrintingGitTagOps
"""
