"""Resolve where a bundle's keymaps are listed from."""

import logging
import re
from enum import Enum
from pathlib import Path
from urllib.parse import quote, unquote, urlparse

from pydantic import BaseModel

from ..config import PlaymapConfig
from ..errors import PlaymapValidationError

log = logging.getLogger(__name__)

LOCAL_PREFIX = "file://"

REPOSITORY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+$")


class SourceKind(str, Enum):
    REMOTE = "remote"
    LOCAL = "local"


class KeymapSource(BaseModel):
    """A resolved keymap listing location."""

    kind: SourceKind
    location: str

    @property
    def is_local(self) -> bool:
        return self.kind is SourceKind.LOCAL

    @property
    def path(self) -> Path:
        """Local directory path; only meaningful for local sources."""
        return Path(self.location)


def contents_url(repository: str, bundle_id: str, config: PlaymapConfig) -> str:
    """Build the GitHub contents API URL for a bundle directory."""
    path = "/".join(part for part in (config.keymap_root, quote(bundle_id, safe="/")) if part)
    return f"{config.api_base}/repos/{repository}/contents/{path}"


def local_directory(source: str, bundle_id: str) -> Path:
    """Turn a file:// source plus bundle ID into a directory path."""
    parsed = urlparse(source)
    base = unquote(parsed.netloc + parsed.path)
    if not base:
        raise PlaymapValidationError("Invalid local directory URL.")
    return Path(base).expanduser() / bundle_id


def resolve_source(
    bundle_id: str,
    source: str | None = None,
    config: PlaymapConfig | None = None,
) -> KeymapSource:
    """Resolve a bundle ID and optional source override to a listing location.

    Args:
        bundle_id: App bundle identifier (may be empty to list the root)
        source: GitHub OWNER/REPO, or file:// URL of a local keymap directory
        config: Settings providing the default repository and API base

    Returns:
        KeymapSource pointing at a remote API URL or local directory

    Raises:
        PlaymapValidationError: If the source is malformed
    """
    config = config or PlaymapConfig()

    if source and source.startswith(LOCAL_PREFIX):
        directory = local_directory(source, bundle_id)
        log.debug("Resolved local source %s", directory)
        return KeymapSource(kind=SourceKind.LOCAL, location=str(directory))

    repository = source or config.repository
    if not REPOSITORY_PATTERN.match(repository):
        raise PlaymapValidationError("Invalid GitHub repository.")

    url = contents_url(repository, bundle_id, config)
    log.debug("Resolved remote source %s", url)
    return KeymapSource(kind=SourceKind.REMOTE, location=url)
