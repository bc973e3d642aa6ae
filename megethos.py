#!/usr/bin/env python3
"""
Megethos — Ancient Greek μέγεθος (magnitude)

Finds the largest files in one or more directory trees. Files are grouped by
exact byte size and only the N largest distinct sizes are kept while
scanning, so memory use does not grow with the size of the tree.

Usage:
    megethos <dir> [<dir> ...]              # Ten largest sizes, binary units
    megethos <dir> -n 25                    # Twenty-five largest sizes
    megethos <dir> -G                       # Sizes in powers of ten (kB, MB, ...)
    megethos <dir> -X --skip-hidden         # Stay on one file system, skip dot entries
    megethos --generate-completion bash     # Print a shell completion script

Exit status is 0 for a clean run, 1 if a directory does not exist, and
otherwise the number of entries that could not be read (at most 255).
"""

import argparse
import sys
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

import shtab

from auxiliary import format_bytes, format_path_for_display
from console_ui import ConsoleUI
from directory_walker import WalkError, is_directory, walk_directory
from megethos_config import DEFAULT_NUMFILES, MegethosConfig, SharedConfigManager
from size_tracker import TopSizeTracker

__version__ = "0.1.0"

# Exit codes wrap modulo 256; never let an error count read as success
MAX_EXIT_STATUS = 255

SIZE_COLUMN_WIDTH = 10

# ---------------------------------------------------------------------------
# Scanning
# ---------------------------------------------------------------------------


@dataclass
class ScanResult:
    tracker: TopSizeTracker
    error_count: int = 0
    files_seen: int = 0
    scan_duration: float = 0.0


def search_directory_tree(
    roots: Iterable[str],
    tracker: TopSizeTracker,
    skip_hidden: bool = False,
    same_file_system: bool = False,
    on_error: Optional[Callable[[WalkError], None]] = None,
) -> ScanResult:
    """Feed every regular file under the given roots into the tracker

    Args:
        roots: Directories to walk, in order
        tracker: Tracker that receives each regular file
        skip_hidden: Skip dot entries without descending into them
        same_file_system: Do not leave the file system of each root
        on_error: Called once per entry that could not be read

    Returns:
        ScanResult holding the tracker and the error tally
    """
    result = ScanResult(tracker=tracker)
    start = time.monotonic()

    for root in roots:
        for item in walk_directory(root, skip_hidden=skip_hidden, same_file_system=same_file_system):
            if isinstance(item, WalkError):
                result.error_count += 1
                if on_error:
                    on_error(item)
                continue

            if not item.is_file:
                continue

            result.files_seen += 1
            tracker.add_file(item.size, item.path)

    result.scan_duration = time.monotonic() - start
    return result


# ---------------------------------------------------------------------------
# Megethos
# ---------------------------------------------------------------------------


class Megethos:
    """Main application class for the Megethos largest-file finder."""

    def __init__(
        self,
        args: argparse.Namespace,
        ui: Optional[ConsoleUI] = None,
        config_manager: Optional[SharedConfigManager] = None,
    ):
        self.args = args
        self.ui = ui or ConsoleUI()
        self.config_manager = config_manager or SharedConfigManager()

    def resolve_options(self) -> MegethosConfig:
        """Merge command-line flags over the configured defaults"""
        config = self.config_manager.load()

        numfiles = getattr(self.args, "numfiles", None)
        return MegethosConfig(
            numfiles=config.numfiles if numfiles is None else numfiles,
            decimal_units=bool(getattr(self.args, "gigabyte", False)) or config.decimal_units,
            skip_hidden=bool(getattr(self.args, "skip_hidden", False)) or config.skip_hidden,
            same_file_system=bool(getattr(self.args, "xdev", False)) or config.same_file_system,
        )

    def _report_error(self, error: WalkError):
        self.ui.print_error(f"{error.path}: {error.message}")

    # -- reporting -----------------------------------------------------------

    def report(self, result: ScanResult, decimal: bool = False):
        """Print one line per size group, smallest of the kept sizes first"""
        for group in result.tracker.results():
            size = format_bytes(group.size, decimal=decimal)
            first, *rest = group.paths
            self.ui.print_plain(f"{size:>{SIZE_COLUMN_WIDTH}} {first}")
            # Further files of the same size go below, without a size
            for path in rest:
                self.ui.print_plain(f"{' ' * (SIZE_COLUMN_WIDTH + 1)}{path}")

    def summary(self, result: ScanResult):
        tracker = result.tracker
        self.ui.print_progress(
            f"Scanned {result.files_seen:,} files in {result.scan_duration:.1f}s, "
            f"kept {tracker.file_count:,} files in {tracker.distinct_count} sizes"
        )
        if result.error_count:
            self.ui.print_warning(f"{result.error_count:,} entries could not be read")

    # -- main entry point ----------------------------------------------------

    def run(self) -> int:
        dirs = list(getattr(self.args, "dirs", None) or [])
        if not dirs:
            self.ui.print_error("Please provide a directory to scan.")
            return 1

        # Check every root before scanning so a typo never yields a partial report
        for path in dirs:
            if not is_directory(path):
                self.ui.print_error(f"Directory {path} does not exist. Exiting...")
                return 1

        options = self.resolve_options()
        shown = ", ".join(format_path_for_display(path) for path in dirs)
        self.ui.print_info(f"TOP{options.numfiles} Finding the {options.numfiles} largest files in {shown}")

        tracker = TopSizeTracker(options.numfiles)
        result = search_directory_tree(
            dirs,
            tracker,
            skip_hidden=options.skip_hidden,
            same_file_system=options.same_file_system,
            on_error=self._report_error,
        )

        self.report(result, decimal=options.decimal_units)
        self.summary(result)
        return min(result.error_count, MAX_EXIT_STATUS)


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"count must not be negative: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="megethos",
        description="Megethos — find the largest files in directory trees",
    )
    parser.add_argument(
        "dirs", nargs="*", help="Directories to check for largest files"
    ).complete = shtab.DIRECTORY
    parser.add_argument(
        "-n",
        dest="numfiles",
        type=_non_negative_int,
        default=None,
        metavar="NUM",
        help=f"Number of distinct file sizes to display (default: {DEFAULT_NUMFILES})",
    )
    parser.add_argument("-X", dest="xdev", action="store_true", help="Don't descend into other file systems")
    parser.add_argument("-G", dest="gigabyte", action="store_true", help="Show sizes in powers of ten")
    parser.add_argument("--skip-hidden", action="store_true", help="Skip hidden files and directories")
    parser.add_argument(
        "--generate-completion",
        dest="generator",
        choices=shtab.SUPPORTED_SHELLS,
        metavar="SHELL",
        help=f"Print a completion script for SHELL ({', '.join(shtab.SUPPORTED_SHELLS)}) and exit",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.generator:
        ui = ConsoleUI()
        ui.print_info(f"Generating completion file for {args.generator}...")
        ui.write_raw(shtab.complete(parser, shell=args.generator))
        return 0

    if not args.dirs:
        parser.error("the following arguments are required: dirs")

    app = Megethos(args)
    try:
        return app.run()
    except KeyboardInterrupt:
        app.ui.print_warning("\nInterrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
