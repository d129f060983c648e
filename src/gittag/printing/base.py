"""Shared behavior for gateway wrappers that echo commands before running them."""

from typing import Any

import click

from gittag.output import user_output


class PrintingBase:
    """Base for printing wrappers.

    Subclasses also inherit from a gateway ABC and delegate every call to
    ``self._wrapped`` after optionally emitting the command being run.
    """

    def __init__(self, wrapped: Any, *, script_mode: bool = False, dry_run: bool = False) -> None:
        """Create a printing wrapper.

        Args:
            wrapped: Implementation to delegate to (Real or DryRun)
            script_mode: Suppress all printed output
            dry_run: Whether the wrapped implementation is a dry-run wrapper
        """
        self._wrapped = wrapped
        self._script_mode = script_mode
        self._dry_run = dry_run

    def _emit(self, message: str) -> None:
        if self._script_mode:
            return
        user_output(message)

    def _format_command(self, command: str) -> str:
        # Dry-run wrappers print their own "[DRY RUN]" line
        if self._dry_run:
            return click.style(f"$ {command}", dim=True)
        return click.style(f"$ {command}", fg="cyan")
