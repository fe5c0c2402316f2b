#!/usr/bin/env python3
"""
clipmenu - clipboard history picker for Wayland and X11

    clipmenu [menu]          save the current clipboard, then pick an entry to restore
    clipmenu capture|save    save the current clipboard only (for clipboard-change hooks)
    clipmenu list            print the stored history
    clipmenu clear           forget the stored history
    clipmenu dir <directory> copy a directory tree and its files to the clipboard
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from clipmenu import __version__
from clipmenu.core.di_container import AppContainer
from clipmenu.errors import (
    BackendUnavailableError,
    ClipboardWriteError,
    ClipMenuError,
    NoHistoryError,
    NoMatchError,
    StorageError,
)
from clipmenu.utils.formatting import format_size

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_FAILURE = 2

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ArgumentParser(argparse.ArgumentParser):
    """argparse parser that exits with status 1 on usage errors"""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return number


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="clipmenu", description="Clipboard history picker")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", type=Path, help="Path to settings.yml")
    parser.add_argument("--history-file", type=Path, help="Override the history file location")
    parser.add_argument("--max-entries", type=_positive_int, help="Maximum number of stored entries")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")

    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.add_parser("menu", help="Save the clipboard, then pick an entry to restore (default)")
    subparsers.add_parser("capture", aliases=["save"], help="Save the current clipboard to history")
    subparsers.add_parser("list", help="Print the stored history")
    subparsers.add_parser("clear", help="Delete the stored history")
    dir_parser = subparsers.add_parser("dir", help="Copy a directory tree and file contents to the clipboard")
    dir_parser.add_argument("directory", help="Directory to copy")
    return parser


def configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def run_capture(container: AppContainer) -> int:
    container.menu_service().capture()
    return EXIT_OK


def run_menu(container: AppContainer) -> int:
    # Resolve the picker before touching the history so a missing tool fails fast
    picker = container.picker
    available = getattr(picker, "available", None)
    if available is not None and not available():
        raise BackendUnavailableError(f"Picker '{container.settings.picker.command}' not found in PATH")

    try:
        result = container.menu_service().menu()
    except NoHistoryError as e:
        print(str(e), file=sys.stderr)
        return EXIT_USAGE

    if result.status == "copied":
        print(f"Copied: {result.preview}")
    return EXIT_OK


def run_list(container: AppContainer) -> int:
    for entry in container.history_service.list():
        print(entry)
    return EXIT_OK


def run_clear(container: AppContainer) -> int:
    container.history_service.clear()
    return EXIT_OK


def run_dir(container: AppContainer, directory: str) -> int:
    # A bad directory is a usage error even when no clipboard tool is available
    try:
        snapshot = container.snapshot_service().build(directory)
    except NotADirectoryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    clipboard = container.clipboard
    if not clipboard.write(snapshot.text):
        raise ClipboardWriteError(f"Could not copy to clipboard via {clipboard.name}")

    print("✅  Copied to clipboard!")
    print(f"    Directory : {snapshot.directory}")
    print(f"    Files     : {snapshot.file_count}")
    print(f"    Size      : {snapshot.byte_count} bytes ({format_size(snapshot.byte_count)})")
    print(f"    Clipboard : {clipboard.name}")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    command = args.command or "menu"
    logger.debug(f"Running command {command!r}")

    try:
        container = AppContainer.create(
            config_path=args.config,
            history_path=args.history_file,
            max_entries=args.max_entries,
        )
        if command in ("capture", "save"):
            return run_capture(container)
        if command == "menu":
            return run_menu(container)
        if command == "list":
            return run_list(container)
        if command == "clear":
            return run_clear(container)
        if command == "dir":
            return run_dir(container, args.directory)
    except (BackendUnavailableError, StorageError, NoMatchError, ClipboardWriteError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except ClipMenuError as e:
        logger.error(f"Unexpected clipmenu error: {e}")
        return EXIT_FAILURE

    parser.error(f"unknown command {command!r}")
    return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
