"""Keymap listing and download from GitHub or a local directory."""

from .client import GitHubClient, GITHUB_ACCEPT
from .entries import (
    DirectoryEntry,
    parse_listing,
    list_local,
    list_entries,
    find_entry,
    find_readme,
    read_entry,
    fetch_readme,
    download_entry,
)
from .source import KeymapSource, SourceKind, resolve_source

__all__ = [
    # Client
    "GitHubClient",
    "GITHUB_ACCEPT",
    # Source
    "KeymapSource",
    "SourceKind",
    "resolve_source",
    # Entries
    "DirectoryEntry",
    "parse_listing",
    "list_local",
    "list_entries",
    "find_entry",
    "find_readme",
    "read_entry",
    "fetch_readme",
    "download_entry",
]
