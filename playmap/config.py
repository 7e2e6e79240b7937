"""Configuration models and loaders for playmap."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError

log = logging.getLogger(__name__)

DEFAULT_REPOSITORY = "PlayCover/keymaps"
DEFAULT_API_BASE = "https://api.github.com"
DEFAULT_KEYMAP_ROOT = "keymapping"
DEFAULT_DOWNLOAD_DIR = "~/Library/Containers/io.playcover.PlayCover/Keymapping"
DEFAULT_CONFIG_PATH = Path("~/.config/playmap/config.yaml")


class PlaymapConfig(BaseModel):
    """Settings shared by the fetch commands."""

    model_config = ConfigDict(extra="forbid", validate_default=True)

    repository: str = Field(DEFAULT_REPOSITORY, description="Default GitHub OWNER/REPO")
    api_base: str = Field(DEFAULT_API_BASE, description="GitHub API root URL")
    keymap_root: str = Field(DEFAULT_KEYMAP_ROOT, description="Directory holding bundle folders")
    download_dir: Path = Field(Path(DEFAULT_DOWNLOAD_DIR), description="Default download location")
    timeout: float = Field(30.0, gt=0, description="HTTP timeout in seconds")
    user_agent: str = Field("playmap", description="User-Agent header sent to GitHub")

    @field_validator("download_dir")
    @classmethod
    def _expand_download_dir(cls, value: Path) -> Path:
        return value.expanduser()

    @field_validator("api_base")
    @classmethod
    def _strip_api_base(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("keymap_root")
    @classmethod
    def _strip_keymap_root(cls, value: str) -> str:
        return value.strip("/")


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and return its contents."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_config(path: Path | None = None) -> PlaymapConfig:
    """Load playmap configuration.

    An explicit path must exist. Without one, the per-user config file is used
    when present, otherwise built-in defaults apply.

    Args:
        path: Optional path to a YAML config file

    Returns:
        Validated PlaymapConfig

    Raises:
        ConfigError: If the file cannot be read or holds invalid settings
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH.expanduser()
        if not path.exists():
            return PlaymapConfig()

    log.debug("Loading config from %s", path)
    try:
        data = load_yaml(path)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    try:
        return PlaymapConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e
