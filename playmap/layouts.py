"""Keyboard layout tables and Playmap key-code remapping."""

import logging
import re
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from .errors import LayoutFileError, PlaymapValidationError

log = logging.getLogger(__name__)

PLAYMAP_SUFFIX = ".playmap"

# Matches one key-code field; the digits are compared as literal text
INTEGER_FIELD = re.compile(r"<integer>(-?\d+)</integer>")


class Layout(str, Enum):
    """Supported keyboard layouts. QWERTY is the baseline."""

    QWERTY = "QWERTY"
    AZERTY = "AZERTY"
    QWERTZ = "QWERTZ"

    @classmethod
    def parse(cls, value: str) -> "Layout":
        """Look up a layout by name, ignoring case.

        Raises:
            PlaymapValidationError: If the name is not a supported layout
        """
        try:
            return cls(value.strip().upper())
        except ValueError:
            choices = ", ".join(layout.value for layout in cls)
            raise PlaymapValidationError(
                f"Unknown layout '{value}'. Choose one of: {choices}"
            ) from None


# QWERTY -> layout, keyed by macOS virtual key code
LAYOUT_MAPPINGS: Mapping[Layout, Mapping[int, int]] = MappingProxyType({
    Layout.QWERTY: MappingProxyType({}),
    Layout.AZERTY: MappingProxyType({
        24: 0,   # Q -> A
        23: 11,  # W -> Z
        0: 24,   # A -> Q
        11: 23,  # Z -> W
        41: 41,  # M -> ;
    }),
    Layout.QWERTZ: MappingProxyType({
        28: 44,  # Y -> Z
        44: 28,  # Z -> Y
    }),
})

# layout -> QWERTY
REVERSE_MAPPINGS: Mapping[Layout, Mapping[int, int]] = MappingProxyType({
    layout: MappingProxyType({to: frm for frm, to in table.items()})
    for layout, table in LAYOUT_MAPPINGS.items()
    if layout is not Layout.QWERTY
})


def select_mapping(from_layout: Layout, to_layout: Layout) -> Mapping[int, int]:
    """Pick the key-code table for a conversion.

    Args:
        from_layout: Layout the file currently uses
        to_layout: Desired layout

    Returns:
        Mapping of original key code -> replacement key code
    """
    if from_layout == to_layout:
        return MappingProxyType({})
    if to_layout is Layout.QWERTY:
        return REVERSE_MAPPINGS.get(from_layout, MappingProxyType({}))
    return LAYOUT_MAPPINGS[to_layout]


def modify_layout(content: str, from_layout: Layout, to_layout: Layout) -> str:
    """Rewrite key codes in Playmap content from one layout to another.

    Every ``<integer>N</integer>`` whose N is a key of the selected table is
    replaced with the mapped value. All replacements happen in one pass, so
    swapped pairs (e.g. 24 <-> 0) never get substituted twice.

    Args:
        content: Playmap file text
        from_layout: Layout the content currently uses
        to_layout: Desired layout

    Returns:
        Remapped content; unchanged when the layouts match
    """
    mapping = select_mapping(from_layout, to_layout)
    if not mapping:
        return content

    replacements = {str(original): str(new) for original, new in mapping.items()}

    def _replace(match: re.Match) -> str:
        new = replacements.get(match.group(1))
        if new is None:
            return match.group(0)
        return f"<integer>{new}</integer>"

    return INTEGER_FIELD.sub(_replace, content)


def validate_playmap_path(path: Path, role: str = "input") -> None:
    """Ensure a path names a .playmap file.

    Raises:
        PlaymapValidationError: If the extension is missing or different
    """
    if not str(path).endswith(PLAYMAP_SUFFIX):
        raise PlaymapValidationError(f"The {role} file must have a {PLAYMAP_SUFFIX} extension.")


def convert_file(
    input_path: Path,
    output_path: Path,
    from_layout: Layout,
    to_layout: Layout,
) -> Path:
    """Read a Playmap file, remap its layout and write the result.

    Both paths are validated before any file is touched. An existing output
    file is overwritten.

    Args:
        input_path: Source .playmap file
        output_path: Destination .playmap file
        from_layout: Layout of the source file
        to_layout: Layout to convert to

    Returns:
        The output path

    Raises:
        PlaymapValidationError: If either path lacks the .playmap extension
        LayoutFileError: If reading or writing fails
    """
    validate_playmap_path(input_path, "input")
    validate_playmap_path(output_path, "output")

    try:
        with open(input_path, encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise LayoutFileError(f"Failed to read input file {input_path}: {e}") from e

    modified = modify_layout(content, from_layout, to_layout)

    try:
        with open(output_path, "w", encoding="utf-8", newline="") as f:
            f.write(modified)
    except OSError as e:
        raise LayoutFileError(f"Failed to write output file {output_path}: {e}") from e

    log.debug("Wrote %d characters to %s", len(modified), output_path)
    return Path(output_path)
