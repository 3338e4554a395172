"""
cli_entry.py - CLI Entry Point

Parses arguments into a Configuration, runs the batch and prints the report
"""

import argparse
import json
import logging
import re
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..core import (
    run, Configuration, ConfigurationError, BatchReport, OutcomeKind,
    TargetKind, PaddingDirection, SortKey,
)


def directory_arg(value: str) -> Path:
    """argparse type: existing directory"""
    path = Path(value)
    if not (path.exists() and path.is_dir()):
        raise argparse.ArgumentTypeError(f"Invalid directory: {value}")
    return path


def non_negative_int(value: str) -> int:
    """argparse type: integer >= 0"""
    try:
        num = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Failed to parse integer: {e}") from e
    if num < 0:
        raise argparse.ArgumentTypeError(f"Value cannot be negative: {value}")
    return num


def positive_int(value: str) -> int:
    """argparse type: integer >= 1"""
    num = non_negative_int(value)
    if num == 0:
        raise argparse.ArgumentTypeError("Value must be at least 1")
    return num


def regex_arg(value: str) -> "re.Pattern":
    """argparse type: compiled regular expression"""
    try:
        return re.compile(value)
    except re.error as e:
        raise argparse.ArgumentTypeError(f"Failed to parse regex: {e}") from e


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="rena",
        description="Batch rename the files (or folders) of a directory",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Number every file: item_0000000000.jpg, item_0000000001.jpg, ...
  rena ./images

  # Only rename images, starting at 1 with 3 digits
  rena ./images --match "\\.(jpe?g|png)$" -n 1 --padding 3 -p photo

  # Rewrite names through capture groups
  rena ./Show --match "Show\\.S(\\d+)E(\\d+)\\.1080p\\.mkv" \\
       --match-rename "Show S${1} E${2} (1080p).mkv" --dry-run
"""
    )

    parser.add_argument("folder", type=directory_arg, metavar="FOLDER",
                        help="Path to the folder containing items")
    parser.add_argument("--dir", action="store_true",
                        help="Rename folders instead of files")
    parser.add_argument("--verbose", action="store_true",
                        help="Log every successful rename")
    parser.add_argument("-n", "--origin", type=non_negative_int, default=0,
                        help="Number to start counting at (default: 0)")
    parser.add_argument("-p", "--prefix", type=str, default="item",
                        help="Prefix for every item, without delimiters (default: item)")
    parser.add_argument("--padding", type=non_negative_int, default=10,
                        help="Width the number is zero-padded to (default: 10)")
    parser.add_argument("--padding-direction", type=str, default="left",
                        choices=[d.value for d in PaddingDirection],
                        help="Where padding zeros go (default: left)")
    parser.add_argument("-m", "--match", type=regex_arg, default=None,
                        help="Regex an item's name must match to be renamed")
    parser.add_argument("--match-rename", type=str, default=None, metavar="TEMPLATE",
                        help="Rename matches to TEMPLATE; $1 or ${1} is a capture group "
                             "(requires --match)")
    parser.add_argument("--dry-run", action="store_true",
                        help="Preview only, do not rename anything")
    parser.add_argument("--sort", type=str, default=SortKey.NAME.value,
                        choices=[k.value for k in SortKey],
                        help="Numbering order: by name, or raw directory listing (default: name)")
    parser.add_argument("-j", "--jobs", type=positive_int, default=None,
                        help="Number of rename threads (default: automatic)")
    parser.add_argument("--json", action="store_true",
                        help="Print the report as JSON")

    return parser


def parse_args(argv: Optional[List[str]] = None) -> Tuple[Configuration, bool]:
    """Parse command-line arguments into (Configuration, print_json)"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.match_rename is not None and args.match is None:
        parser.error("--match-rename requires --match")

    return Configuration(
        folder=args.folder,
        target_kind=TargetKind.DIRECTORY if args.dir else TargetKind.FILE,
        origin=args.origin,
        prefix=args.prefix,
        padding_width=args.padding,
        padding_direction=PaddingDirection(args.padding_direction),
        filter_pattern=args.match,
        rename_template=args.match_rename,
        dry_run=args.dry_run,
        verbose=args.verbose,
        sort_key=SortKey(args.sort),
        max_workers=args.jobs,
    ), args.json


_STATUS_STYLE = {
    OutcomeKind.RENAMED: ("Renamed", "green"),
    OutcomeKind.SKIPPED_DRY_RUN: ("Dry run", "cyan"),
    OutcomeKind.SKIPPED_COLLISION: ("Exists", "yellow"),
    OutcomeKind.FAILED: ("Failed", "red"),
}


def print_report(report: BatchReport, console: Console, verbose: bool = False) -> None:
    """Print the outcome table and summary"""
    shown = [
        o for o in report.outcomes
        if verbose or o.kind != OutcomeKind.RENAMED
    ]

    if shown:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Original Name")
        table.add_column("New Name")
        table.add_column("Status")
        table.add_column("Detail", overflow="fold")
        for o in shown:
            label, style = _STATUS_STYLE[o.kind]
            # Text() so brackets in file names are not read as markup
            table.add_row(
                Text(o.original_path.name),
                Text(o.new_path.name),
                Text(label, style=style),
                Text(o.error),
            )
        console.print(table)

    for warning in report.warnings:
        console.print(Text.assemble(("Warning: ", "yellow"), warning))

    console.print(Text(report.summary()))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s.%(msecs)03d %(levelname)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    config, as_json = parse_args(argv)
    console = Console()

    try:
        logging.info("Starting execution...")
        result = run(config)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130

    if isinstance(result, ConfigurationError):
        logging.error("Encountered an error: %s", result)
        return 1

    if as_json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        print_report(result, console, verbose=config.verbose)

    if result.has_failures:
        logging.error("Completed with %d failure(s)", result.failed_count)
        return 1

    logging.info("Completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
