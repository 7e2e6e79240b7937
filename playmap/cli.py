"""Command-line interface for playmap."""

import argparse
import sys
from pathlib import Path
from typing import Callable

from .config import PlaymapConfig, load_config
from .errors import EntryNotFoundError, PlaymapError, PlaymapValidationError
from .fetch import (
    DirectoryEntry,
    GitHubClient,
    download_entry,
    fetch_readme,
    find_entry,
    list_entries,
    resolve_source,
)
from .layouts import LAYOUT_MAPPINGS, Layout, convert_file
from .log import LEVELS, setup_logging


def _layout_arg(value: str) -> Layout:
    try:
        return Layout.parse(value)
    except PlaymapValidationError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="playmap",
        description="A CLI tool to modify PlayCover's Playmap files",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=LEVELS,
        help="Logging verbosity on stderr (default: WARNING)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config YAML (default: ~/.config/playmap/config.yaml if present)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- fetch subcommand ---
    fetch_parser = subparsers.add_parser(
        "fetch",
        help="Fetch and handle Playmap files from a URL or local directory",
    )
    fetch_parser.add_argument(
        "bundle_id",
        nargs="?",
        default="",
        help="The bundle ID of the keymap",
    )
    fetch_parser.add_argument(
        "--readme",
        action="store_true",
        help="Fetch and print the README.md file if available",
    )
    fetch_parser.add_argument(
        "--download",
        action="store_true",
        help="Prompt for a file to download",
    )
    fetch_parser.add_argument(
        "--file",
        help="Name of the file to download (implies --download, no prompt)",
    )
    fetch_parser.add_argument(
        "--dest",
        type=Path,
        help="Directory to save the downloaded file in",
    )
    fetch_parser.add_argument(
        "--source",
        help="GitHub repository (USERNAME/REPOSITORY) or file:// path to a local repository",
    )

    # --- layout subcommand ---
    layout_parser = subparsers.add_parser(
        "layout",
        help="Modify the layout of a Playmap file",
        description=(
            "Reads a Playmap file, changes its key codes from one keyboard layout "
            "to another and writes the result to the output Playmap."
        ),
    )
    layout_parser.add_argument("input", type=Path, help="Path to the input file")
    layout_parser.add_argument("output", type=Path, help="Path to the output file")
    layout_parser.add_argument(
        "from_layout",
        type=_layout_arg,
        help="Current layout of the file: QWERTY, AZERTY, or QWERTZ",
    )
    layout_parser.add_argument(
        "to_layout",
        type=_layout_arg,
        help="Desired layout of the file: QWERTY, AZERTY, or QWERTZ",
    )

    # --- layouts subcommand ---
    subparsers.add_parser(
        "layouts",
        help="List supported layouts and their key-code tables",
    )

    return parser


def prompt(message: str) -> str:
    """Print a question and read one line from stdin ("" on EOF)."""
    print(message)
    try:
        return input()
    except EOFError:
        return ""


def cmd_fetch(args: argparse.Namespace, config: PlaymapConfig) -> int:
    """Execute fetch subcommand."""
    with GitHubClient(config) as client:
        source = resolve_source(args.bundle_id, args.source, config)
        entries = list_entries(source, client)

        print(f"Contents of directory {args.bundle_id}:")
        for entry in entries:
            print(entry.name)

        if args.readme:
            readme = fetch_readme(entries, client)
            if readme is None:
                print(f"README.md not found in directory {args.bundle_id}.")
            else:
                print("\nREADME.md contents:\n")
                print(readme)

        if args.download or args.file is not None:
            _download(args, config, entries, client)
    return 0


def _download(
    args: argparse.Namespace,
    config: PlaymapConfig,
    entries: list[DirectoryEntry],
    client: GitHubClient,
) -> None:
    # Interactive only when the file name was not given on the command line
    interactive = args.file is None
    if interactive:
        file_name = prompt("\nEnter the name of the file you want to download:")
    else:
        file_name = args.file

    if not file_name:
        raise PlaymapValidationError("Invalid file name.")
    entry = find_entry(entries, file_name)
    if entry is None or not entry.has_locator:
        raise EntryNotFoundError("File not found.")

    destination_dir = args.dest
    if destination_dir is None and interactive:
        location = prompt(
            "Enter custom download location or press Enter to use default "
            f"location ({config.download_dir}):"
        )
        destination_dir = Path(location) if location else None
    if destination_dir is None:
        destination_dir = config.download_dir

    path = download_entry(entries, file_name, destination_dir, client)
    print(f"File downloaded to {path}")


def cmd_layout(args: argparse.Namespace, config: PlaymapConfig) -> int:
    """Execute layout subcommand."""
    convert_file(args.input, args.output, args.from_layout, args.to_layout)
    print(
        f"Layout changed from {args.from_layout.value} to {args.to_layout.value} "
        f"and saved to {args.output}"
    )
    return 0


def cmd_layouts(args: argparse.Namespace, config: PlaymapConfig) -> int:
    """Execute layouts subcommand."""
    for layout, table in LAYOUT_MAPPINGS.items():
        if not table:
            print(f"{layout.value} (baseline)")
            continue
        print(f"{layout.value}:")
        for original, replacement in table.items():
            print(f"  {original} -> {replacement}")
    return 0


COMMANDS: dict[str, Callable[[argparse.Namespace, PlaymapConfig], int]] = {
    "fetch": cmd_fetch,
    "layout": cmd_layout,
    "layouts": cmd_layouts,
}


def run_command(args: argparse.Namespace) -> int:
    """Run the selected subcommand and map failures to exit codes."""
    try:
        config = load_config(args.config)
        return COMMANDS[args.command](args, config)
    except PlaymapError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("Cancelled.", file=sys.stderr)
        return 130


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    sys.exit(run_command(args))


if __name__ == "__main__":
    main()
