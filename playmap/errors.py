"""Exception types raised by playmap commands."""


class PlaymapError(Exception):
    """Base class for errors reported to the user."""


class PlaymapValidationError(PlaymapError):
    """Bad user input: wrong extension, malformed source, empty file name."""


class ConfigError(PlaymapError):
    """Configuration file could not be read or is invalid."""


class FetchError(PlaymapError):
    """A listing or file could not be retrieved or decoded."""

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code

    def __str__(self) -> str:
        message = super().__str__()
        if self.status_code is not None:
            return f"HTTP {self.status_code} for {self.url}: {message}"
        return message


class EntryNotFoundError(PlaymapError):
    """Requested file is not part of the directory listing."""


class DownloadError(PlaymapError):
    """Downloaded content could not be written to disk."""


class LayoutFileError(PlaymapError):
    """Playmap file could not be read or written."""
