"""Subprocess helpers with enriched error reporting."""

import logging
import os
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def copied_env_for_git_subprocess() -> dict[str, str]:
    """Return a copy of the environment that keeps git from prompting.

    GIT_TERMINAL_PROMPT=0 makes git fail instead of waiting on a credential
    prompt when it is not attached to a terminal.
    """
    env = os.environ.copy()
    env["GIT_TERMINAL_PROMPT"] = "0"
    return env


def run_subprocess_with_context(
    *,
    cmd: list[str],
    operation_context: str,
    cwd: Path | None = None,
    env: dict[str, str] | None = None,
) -> subprocess.CompletedProcess[str]:
    """Execute a subprocess and raise RuntimeError with context on failure.

    Output is always captured as text and the command is run with check=True.

    Args:
        cmd: Command and arguments
        operation_context: Human-readable description used in the error
            message (e.g., "create tag 'v1.0.0'")
        cwd: Working directory for the command
        env: Environment for the command (inherits the current one when None)

    Returns:
        The completed process

    Raises:
        RuntimeError: If the command exits non-zero or cannot be started.
            The original exception is available via __cause__.
    """
    logger.debug("Executing: %s", " ".join(cmd))
    try:
        return subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
            env=env,
        )
    except subprocess.CalledProcessError as e:
        error_msg = f"Failed to {operation_context}"
        error_msg += f"\nCommand: {' '.join(cmd)}"
        error_msg += f"\nExit code: {e.returncode}"
        stderr = (e.stderr or "").strip()
        if stderr:
            error_msg += f"\nstderr: {stderr}"
        raise RuntimeError(error_msg) from e
    except FileNotFoundError as e:
        raise RuntimeError(f"Failed to {operation_context}: '{cmd[0]}' not found") from e
