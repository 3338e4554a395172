"""
exec_rename.py - Rename Execution Module

Responsibilities:
- Run each plan on a thread pool (plans touch disjoint paths)
- Re-check the destination right before renaming
- Turn I/O errors into FAILED outcomes without stopping the batch
- dry_run support
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional, Callable
import logging
import os

from .models_fs import RenamePlan, Outcome, OutcomeKind
from .safety_checks import check_destination_free, collision_outcome

logger = logging.getLogger(__name__)


def execute_plan(plan: RenamePlan, dry_run: bool = False, verbose: bool = False) -> Outcome:
    """
    Execute (or simulate) a single plan

    Args:
        plan: Rename plan
        dry_run: Whether to report only
        verbose: Whether to log successful renames

    Returns:
        Outcome for this plan
    """
    ok, reason = check_destination_free(plan.new_path)
    if not ok:
        return collision_outcome(plan, reason)

    if dry_run:
        logger.info("[DRY RUN]: `%s` -> `%s`", plan.original_path, plan.new_path)
        return Outcome(OutcomeKind.SKIPPED_DRY_RUN, plan.original_path, plan.new_path)

    try:
        os.rename(plan.original_path, plan.new_path)
    except OSError as e:
        logger.warning(
            "Failed to rename `%s` to `%s`: %s", plan.original_path, plan.new_path, e
        )
        return Outcome(OutcomeKind.FAILED, plan.original_path, plan.new_path, error=str(e))

    if verbose:
        logger.info("`%s` -> `%s`", plan.original_path, plan.new_path)
    return Outcome(OutcomeKind.RENAMED, plan.original_path, plan.new_path)


def execute_plans(
    plans: List[RenamePlan],
    dry_run: bool = False,
    verbose: bool = False,
    max_workers: Optional[int] = None,
    progress_callback: Optional[Callable[[int, int, str], None]] = None,
) -> List[Outcome]:
    """
    Execute plans concurrently

    Args:
        plans: Plans that passed planning
        dry_run: Whether to report only
        verbose: Whether to log successful renames
        max_workers: Thread pool size (None = executor default)
        progress_callback: Progress callback (current, total, message),
            called from the calling thread only

    Returns:
        Outcomes in plan order
    """
    total = len(plans)
    if total == 0:
        return []

    outcomes: List[Optional[Outcome]] = [None] * total

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        future_to_index = {
            executor.submit(execute_plan, plan, dry_run, verbose): i
            for i, plan in enumerate(plans)
        }

        for done, future in enumerate(as_completed(future_to_index), start=1):
            index = future_to_index[future]
            outcome = future.result()
            outcomes[index] = outcome
            if progress_callback:
                progress_callback(done, total, outcome.describe())

    return outcomes
