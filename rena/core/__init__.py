"""
core - rena Core Module

Provides directory scanning, rename plan generation and concurrent execution.
"""

from .sort_rules import (
    SortKey,
    sort_items,
    get_sort_key,
)

from .models_fs import (
    Configuration,
    ConfigurationError,
    TargetKind,
    PaddingDirection,
    Item,
    RenamePlan,
    PlannedBatch,
    Outcome,
    OutcomeKind,
    BatchReport,
)

from .scan_files import (
    check_folder,
    scan_directory,
)

from .text_match import (
    file_extension,
    pad_counter,
    expand_template,
    is_valid_filename,
)

from .plan_rename import (
    sequential_name,
    substitution_name,
    plan_batch,
)

from .safety_checks import (
    check_destination_free,
    guard_collisions,
)

from .exec_rename import (
    execute_plan,
    execute_plans,
)

from .run_batch import run

__all__ = [
    # Data models
    "Configuration",
    "ConfigurationError",
    "TargetKind",
    "PaddingDirection",
    "Item",
    "RenamePlan",
    "PlannedBatch",
    "Outcome",
    "OutcomeKind",
    "BatchReport",
    "SortKey",

    # Scanning
    "check_folder",
    "scan_directory",

    # Sorting
    "sort_items",
    "get_sort_key",

    # Text processing
    "file_extension",
    "pad_counter",
    "expand_template",
    "is_valid_filename",

    # Planning
    "sequential_name",
    "substitution_name",
    "plan_batch",

    # Safety checks
    "check_destination_free",
    "guard_collisions",

    # Execution
    "execute_plan",
    "execute_plans",
    "run",
]
