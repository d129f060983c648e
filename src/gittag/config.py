import tomllib
from dataclasses import dataclass
from pathlib import Path

import click

CONFIG_FILENAME = ".gittag.toml"
DEFAULT_REMOTE = "origin"
DEFAULT_MESSAGE_PREFIX = "chore(release): "


@dataclass(frozen=True)
class GitTagConfig:
    """In-memory representation of `.gittag.toml`.

    Example .gittag.toml:
      # Remote used for pushing and deleting remote tags
      remote = "upstream"

      # Annotation used when a tag is created without a message
      message_prefix = "release: "
    """

    remote: str = DEFAULT_REMOTE
    message_prefix: str = DEFAULT_MESSAGE_PREFIX


def load_config(repo_root: Path) -> GitTagConfig:
    """Load .gittag.toml from the repository root if present; otherwise return defaults.

    Raises:
        click.ClickException: If the file is not valid TOML
    """
    cfg_path = repo_root / CONFIG_FILENAME
    if not cfg_path.exists():
        return GitTagConfig()

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise click.ClickException(f"Invalid config file {cfg_path}: {e}") from e
    return GitTagConfig(
        remote=str(data.get("remote", DEFAULT_REMOTE)),
        message_prefix=str(data.get("message_prefix", DEFAULT_MESSAGE_PREFIX)),
    )
