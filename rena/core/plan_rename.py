"""
plan_rename.py - Rename Plan Generation Module

Responsibilities:
- Generate target names (sequential numbering / pattern substitution)
- Drop names that would leave the directory
- Hand proposals to the collision guard and output a PlannedBatch
"""

from itertools import count
from pathlib import Path
from typing import List, Optional, Tuple
import logging

from .models_fs import (
    Configuration, Item, RenamePlan, PlannedBatch, TargetKind,
)
from .text_match import file_extension, pad_counter, expand_template, is_valid_filename
from .safety_checks import guard_collisions

logger = logging.getLogger(__name__)


def sequential_name(item: Item, number: int, config: Configuration) -> str:
    """
    Build the numbered name for one item

    Args:
        item: Item being renamed
        number: Counter value assigned to it
        config: Batch configuration

    Returns:
        New base name ({prefix}_{number}{extension})
    """
    num_str = pad_counter(number, config.padding_width, config.padding_direction)
    ext = file_extension(item.name) if item.kind == TargetKind.FILE else ""
    return f"{config.prefix}_{num_str}{ext}"


def substitution_name(item: Item, config: Configuration) -> Optional[str]:
    """
    Apply the rename template to the first match in the item's name

    Args:
        item: Item being renamed
        config: Batch configuration (pattern and template both set)

    Returns:
        New base name, or None if the pattern does not match
    """
    match = config.filter_pattern.search(item.name)
    if match is None:
        return None
    return expand_template(config.rename_template, match)


def propose_sequence(
    items: List[Item], config: Configuration
) -> Tuple[List[Tuple[Item, str]], List[str]]:
    """
    Number items in order, starting at config.origin

    Every item consumes one counter value, even if its name is later dropped.

    Returns:
        ([(item, new_name), ...], warnings)
    """
    proposals = [
        (item, sequential_name(item, number, config))
        for item, number in zip(items, count(config.origin))
    ]
    return proposals, []


def propose_substitution(
    items: List[Item], config: Configuration
) -> Tuple[List[Tuple[Item, str]], List[str]]:
    """
    Rewrite each item's name through the template

    Returns:
        ([(item, new_name), ...], warnings)
    """
    logger.info("Regex: %s", config.filter_pattern.pattern)
    logger.info("Input: %s", config.rename_template)

    proposals: List[Tuple[Item, str]] = []
    warnings: List[str] = []
    for item in items:
        new_name = substitution_name(item, config)
        if new_name is None:
            msg = f"Skip {item.path}: does not match `{config.filter_pattern.pattern}`"
            logger.warning(msg)
            warnings.append(msg)
            continue
        proposals.append((item, new_name))
    return proposals, warnings


def plan_batch(items: List[Item], config: Configuration) -> PlannedBatch:
    """
    Generate the rename plans for an ordered item list

    Args:
        items: Items in numbering order
        config: Batch configuration

    Returns:
        Planned batch with collisions already removed
    """
    batch = PlannedBatch()

    if config.uses_substitution:
        proposals, warnings = propose_substitution(items, config)
    else:
        proposals, warnings = propose_sequence(items, config)
    batch.warnings.extend(warnings)

    plans: List[RenamePlan] = []
    for item, new_name in proposals:
        # Validate new filename
        valid, error = is_valid_filename(new_name)
        if not valid:
            msg = f"Skip {item.path}: {error}"
            logger.warning(msg)
            batch.add_warning(msg)
            continue

        # Both schemes keep the entry in its own directory
        dst = Path(item.path.parent) / new_name
        plans.append(RenamePlan(original_path=item.path, new_path=dst))

    batch.plans, batch.skipped = guard_collisions(plans)
    return batch
