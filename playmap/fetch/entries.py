"""Directory entries: listing, README lookup and downloads."""

import logging
import shutil
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict

from ..errors import (
    DownloadError,
    EntryNotFoundError,
    FetchError,
    PlaymapValidationError,
)
from .client import GitHubClient
from .source import KeymapSource

log = logging.getLogger(__name__)

README_NAME = "readme.md"


class DirectoryEntry(BaseModel):
    """One file in a keymap directory.

    Remote entries carry a download_url; local entries carry a path.
    """

    model_config = ConfigDict(extra="ignore")

    name: str
    download_url: str | None = None
    path: Path | None = None

    @property
    def is_local(self) -> bool:
        return self.path is not None

    @property
    def has_locator(self) -> bool:
        return self.path is not None or bool(self.download_url)


def parse_listing(data: Any) -> list[DirectoryEntry]:
    """Build entries from a decoded contents API response.

    Args:
        data: Decoded JSON; must be a list of objects

    Returns:
        Entries for every object with a string ``name``

    Raises:
        FetchError: If the payload is not a JSON array of objects
    """
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise FetchError("Failed to fetch or parse keymaps.")

    entries = []
    for item in data:
        name = item.get("name")
        if not isinstance(name, str):
            log.debug("Skipping listing item without a name: %r", item)
            continue
        url = item.get("download_url")
        entries.append(DirectoryEntry(name=name, download_url=url if isinstance(url, str) else None))
    return entries


def list_local(directory: Path) -> list[DirectoryEntry]:
    """List a local keymap directory, sorted by name.

    Raises:
        FetchError: If the directory cannot be read
    """
    try:
        children = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise FetchError(f"Error reading local directory: {e}") from e
    return [DirectoryEntry(name=child.name, path=child.resolve()) for child in children]


def list_entries(source: KeymapSource, client: GitHubClient) -> list[DirectoryEntry]:
    """List the entries of a resolved keymap source."""
    if source.is_local:
        return list_local(source.path)
    return parse_listing(client.get_json(source.location))


def find_entry(entries: list[DirectoryEntry], name: str) -> DirectoryEntry | None:
    """Return the entry whose name matches exactly, if any."""
    return next((entry for entry in entries if entry.name == name), None)


def find_readme(entries: list[DirectoryEntry]) -> DirectoryEntry | None:
    """Return the README file entry (name compared case-insensitively), if any.

    Entries that cannot be read as a file, such as directories, are skipped.
    """
    for entry in entries:
        if entry.name.lower() != README_NAME or not entry.has_locator:
            continue
        if entry.path is not None and not entry.path.is_file():
            continue
        return entry
    return None


def read_entry(entry: DirectoryEntry, client: GitHubClient) -> bytes:
    """Fetch an entry's content from disk or over HTTP.

    Raises:
        FetchError: If the entry has no locator or cannot be read
    """
    if entry.path is not None:
        try:
            return entry.path.read_bytes()
        except OSError as e:
            raise FetchError(f"Error reading {entry.path}: {e}") from e
    if entry.download_url:
        return client.get_bytes(entry.download_url)
    raise FetchError(f"No download location for {entry.name}.")


def fetch_readme(entries: list[DirectoryEntry], client: GitHubClient) -> str | None:
    """Return README text, or None when the listing has no README."""
    entry = find_readme(entries)
    if entry is None:
        return None
    return read_entry(entry, client).decode("utf-8", errors="replace")


def download_entry(
    entries: list[DirectoryEntry],
    name: str,
    destination_dir: Path,
    client: GitHubClient,
) -> Path:
    """Download one listed file into a directory.

    Args:
        entries: Listing the file must belong to
        name: Exact file name to download
        destination_dir: Directory to write into (created if missing)
        client: HTTP client for remote entries

    Returns:
        Path of the written file

    Raises:
        PlaymapValidationError: If name is empty
        EntryNotFoundError: If name is not in the listing
        FetchError: If the content cannot be retrieved
        DownloadError: If the file cannot be written
    """
    if not name:
        raise PlaymapValidationError("Invalid file name.")

    entry = find_entry(entries, name)
    if entry is None or not entry.has_locator:
        raise EntryNotFoundError("File not found.")

    destination = Path(destination_dir).expanduser() / entry.name

    if entry.is_local:
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(entry.path, destination)
        except OSError as e:
            raise DownloadError(f"Error writing file: {e}") from e
    else:
        data = read_entry(entry, client)
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_bytes(data)
        except OSError as e:
            raise DownloadError(f"Error writing file: {e}") from e

    log.debug("Saved %s to %s", entry.name, destination)
    return destination
