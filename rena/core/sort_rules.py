"""
sort_rules.py - Sorting Rules Module

Decides the order items are numbered in
"""

from enum import Enum
from typing import List, Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from .models_fs import Item


class SortKey(Enum):
    """Sort key enumeration"""
    NAME = "name"          # Filename, case-insensitive first
    LISTING = "listing"    # Whatever order the directory listing yields


def get_sort_key(sort_by: SortKey) -> Callable[["Item"], tuple]:
    """
    Get sort key function

    Args:
        sort_by: Sorting method (LISTING has no key)

    Returns:
        Sort key function
    """
    if sort_by == SortKey.NAME:
        # Exact name breaks ties between names differing only in case
        return lambda item: (item.name.casefold(), item.name)
    raise ValueError(f"No sort key for {sort_by}")


def sort_items(items: List["Item"], sort_by: SortKey = SortKey.NAME) -> List["Item"]:
    """
    Sort item list

    Args:
        items: Items in listing order
        sort_by: Sorting method

    Returns:
        Sorted item list (new list)
    """
    if sort_by == SortKey.LISTING:
        return list(items)
    return sorted(items, key=get_sort_key(sort_by))
