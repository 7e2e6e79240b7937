"""
Tools for PlayCover Playmap keymap files.

Usage:
    python -m playmap fetch <bundle_id> [--readme] [--download] [--source OWNER/REPO]
    python -m playmap layout input.playmap output.playmap QWERTY AZERTY
"""

from .config import PlaymapConfig, load_config, load_yaml
from .errors import (
    PlaymapError,
    PlaymapValidationError,
    ConfigError,
    FetchError,
    EntryNotFoundError,
    DownloadError,
    LayoutFileError,
)
from .layouts import (
    Layout,
    LAYOUT_MAPPINGS,
    REVERSE_MAPPINGS,
    select_mapping,
    modify_layout,
    validate_playmap_path,
    convert_file,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    "PlaymapConfig",
    "load_config",
    "load_yaml",
    # Errors
    "PlaymapError",
    "PlaymapValidationError",
    "ConfigError",
    "FetchError",
    "EntryNotFoundError",
    "DownloadError",
    "LayoutFileError",
    # Layouts
    "Layout",
    "LAYOUT_MAPPINGS",
    "REVERSE_MAPPINGS",
    "select_mapping",
    "modify_layout",
    "validate_playmap_path",
    "convert_file",
]
