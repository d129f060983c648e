"""CLI error boundary for tag operation failures."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import click

from gittag.errors import TagError
from gittag.output import user_output

logger = logging.getLogger(__name__)


@contextmanager
def tag_error_boundary() -> Iterator[None]:
    """Report a TagError as a red error line and exit with status 1.

    The git failure behind the error (exit code, stderr) is logged at DEBUG
    so it shows up with --debug.
    """
    try:
        yield
    except TagError as e:
        cause = e.__cause__
        if cause is not None:
            logger.debug("Underlying failure: %s", cause)
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e
