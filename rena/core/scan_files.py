"""
scan_files.py - Directory Scanning Module

Lists the entries of a single directory (non-recursive) that a batch acts on
"""

from pathlib import Path
from typing import List, Optional, Tuple
import logging
import os
import re

from .models_fs import Item, TargetKind, ConfigurationError
from .sort_rules import SortKey, sort_items

logger = logging.getLogger(__name__)


def check_folder(folder: Path) -> Optional[ConfigurationError]:
    """
    Check that the folder exists and is a directory

    Args:
        folder: Target directory

    Returns:
        Error, or None if usable
    """
    folder = Path(folder)
    if not folder.exists():
        return ConfigurationError(f"Folder `{folder}` does not exist.")
    if not folder.is_dir():
        return ConfigurationError(f"`{folder}` is not a folder.")
    return None


def _entry_kind(entry: os.DirEntry) -> Optional[TargetKind]:
    """Kind of entry without following symlinks; None for anything else"""
    if entry.is_dir(follow_symlinks=False):
        return TargetKind.DIRECTORY
    if entry.is_file(follow_symlinks=False):
        return TargetKind.FILE
    return None


def scan_directory(
    directory: Path,
    target_kind: TargetKind = TargetKind.FILE,
    filter_pattern: Optional[re.Pattern] = None,
    sort_by: SortKey = SortKey.NAME,
) -> Tuple[List[Item], List[str]]:
    """
    Scan single directory (non-recursive)

    Args:
        directory: Target directory
        target_kind: Keep files or directories
        filter_pattern: Keep only names this pattern matches (anywhere)
        sort_by: Numbering order

    Returns:
        (items, warnings) - entries that could not be inspected are
        skipped with a warning

    Raises:
        ConfigurationError: Folder missing, not a directory, or unreadable
    """
    directory = Path(directory)
    error = check_folder(directory)
    if error is not None:
        raise error

    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError as e:
        raise ConfigurationError(f"Unable to read directory {directory}: {e}") from e

    results: List[Item] = []
    warnings: List[str] = []

    for entry in entries:
        try:
            kind = _entry_kind(entry)
        except OSError as e:
            msg = f"Unable to get filetype of {entry.name}: {e}"
            logger.warning(msg)
            warnings.append(msg)
            continue

        if kind != target_kind:
            continue

        if filter_pattern is not None and not filter_pattern.search(entry.name):
            continue

        results.append(Item(path=directory / entry.name, kind=kind))

    logger.debug("Scanned %s: %d candidate(s)", directory, len(results))
    return sort_items(results, sort_by), warnings
