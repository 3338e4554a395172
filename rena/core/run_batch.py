"""
run_batch.py - Batch Entry Point

scan -> name -> guard -> execute, for one Configuration
"""

from typing import Callable, Optional, Union
import logging

from .models_fs import Configuration, ConfigurationError, BatchReport
from .scan_files import check_folder, scan_directory
from .plan_rename import plan_batch
from .exec_rename import execute_plans

logger = logging.getLogger(__name__)


def run(
    config: Configuration,
    progress_callback: Optional[Callable[[int, int, str], None]] = None,
) -> Union[BatchReport, ConfigurationError]:
    """
    Run one batch

    Args:
        config: Batch configuration
        progress_callback: Progress callback (current, total, message)

    Returns:
        The batch report, or the ConfigurationError that stopped the run
        before anything was touched
    """
    error = config.validate() or check_folder(config.folder)
    if error is not None:
        return error

    try:
        items, warnings = scan_directory(
            config.folder,
            target_kind=config.target_kind,
            filter_pattern=config.filter_pattern,
            sort_by=config.sort_key,
        )
    except ConfigurationError as e:
        return e

    logger.info("Found %d candidate(s) in %s", len(items), config.folder)

    batch = plan_batch(items, config)
    report = BatchReport(warnings=warnings + batch.warnings)

    executed = execute_plans(
        batch.plans,
        dry_run=config.dry_run,
        verbose=config.verbose,
        max_workers=config.max_workers,
        progress_callback=progress_callback,
    )

    # Report in numbering order, whichever stage produced the outcome
    order = {item.path: i for i, item in enumerate(items)}
    report.outcomes = sorted(
        batch.skipped + executed, key=lambda o: order[o.original_path]
    )
    return report
