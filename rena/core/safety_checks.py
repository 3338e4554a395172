"""
safety_checks.py - Collision Guard

Keeps every rename from landing on an existing entry. Checked once while
planning and again right before each rename; the second check narrows the
race window but cannot close it.
"""

from pathlib import Path
from typing import Tuple, Optional, List, Set
import logging
import os

from .models_fs import RenamePlan, Outcome, OutcomeKind

logger = logging.getLogger(__name__)


def check_destination_free(dst: Path) -> Tuple[bool, Optional[str]]:
    """
    Check that nothing exists at the destination

    Args:
        dst: Destination path

    Returns:
        (is_free, reason)
    """
    # lexists: a dangling symlink would still be replaced by rename
    if os.path.lexists(dst):
        return False, f"File `{dst}` already exists, unable to rename."
    return True, None


def collision_outcome(plan: RenamePlan, reason: str) -> Outcome:
    """Log and build the skipped outcome for a colliding plan"""
    logger.warning(reason)
    return Outcome(
        kind=OutcomeKind.SKIPPED_COLLISION,
        original_path=plan.original_path,
        new_path=plan.new_path,
        error=reason,
    )


def guard_collisions(plans: List[RenamePlan]) -> Tuple[List[RenamePlan], List[Outcome]]:
    """
    Drop plans whose destination exists or is already claimed in this batch

    Args:
        plans: Proposed plans in numbering order

    Returns:
        (kept plans, collision outcomes)
    """
    kept: List[RenamePlan] = []
    skipped: List[Outcome] = []
    claimed: Set[Path] = set()

    for plan in plans:
        ok, reason = check_destination_free(plan.new_path)
        if ok and plan.new_path in claimed:
            ok, reason = False, f"File `{plan.new_path}` is already the destination of another rename."
        if not ok:
            skipped.append(collision_outcome(plan, reason))
            continue
        claimed.add(plan.new_path)
        kept.append(plan)

    return kept, skipped
