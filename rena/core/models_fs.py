"""
models_fs.py - Core Data Structure Definitions

Contains:
- Configuration: Options for a single batch run
- Item: Directory entry selected for renaming
- RenamePlan: Single rename operation
- Outcome / BatchReport: Per-item results of a run
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, List, Dict, Any
import re
from enum import Enum

from .sort_rules import SortKey


class TargetKind(Enum):
    """Kind of directory entry to act on"""
    FILE = "file"
    DIRECTORY = "directory"


class PaddingDirection(Enum):
    """Where zeros are added to the counter"""
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


class OutcomeKind(Enum):
    """Result of a single rename plan"""
    RENAMED = "renamed"
    SKIPPED_DRY_RUN = "skipped_dry_run"
    SKIPPED_COLLISION = "skipped_collision"
    FAILED = "failed"


class ConfigurationError(Exception):
    """Invalid configuration or target folder; nothing was touched"""


@dataclass(frozen=True)
class Configuration:
    """Options for a batch run, read-only once built"""
    folder: Path
    target_kind: TargetKind = TargetKind.FILE
    origin: int = 0                             # Starting number
    prefix: str = "item"
    padding_width: int = 10                     # Zero padding digits
    padding_direction: PaddingDirection = PaddingDirection.LEFT
    filter_pattern: Optional[re.Pattern] = None # Only entries whose name matches
    rename_template: Optional[str] = None       # Selects pattern substitution
    dry_run: bool = False
    verbose: bool = False
    sort_key: SortKey = SortKey.NAME
    max_workers: Optional[int] = None           # None lets the pool decide

    @property
    def uses_substitution(self) -> bool:
        return self.rename_template is not None

    def validate(self) -> Optional[ConfigurationError]:
        """Return the first violated invariant, or None"""
        if self.rename_template is not None and self.filter_pattern is None:
            return ConfigurationError("A rename template requires a match pattern")
        if self.origin < 0:
            return ConfigurationError(f"Origin cannot be negative: {self.origin}")
        if self.padding_width < 0:
            return ConfigurationError(f"Padding cannot be negative: {self.padding_width}")
        if self.max_workers is not None and self.max_workers < 1:
            return ConfigurationError(f"Worker count must be at least 1: {self.max_workers}")
        return None


@dataclass(frozen=True)
class Item:
    """Directory entry produced by the scanner"""
    path: Path
    kind: TargetKind

    @property
    def name(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class RenamePlan:
    """Single rename operation"""
    original_path: Path
    new_path: Path


@dataclass
class PlannedBatch:
    """Plans that survived planning, plus what was dropped on the way"""
    plans: List[RenamePlan] = field(default_factory=list)
    skipped: List["Outcome"] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        self.warnings.append(msg)


@dataclass(frozen=True)
class Outcome:
    """What happened to one plan"""
    kind: OutcomeKind
    original_path: Path
    new_path: Path
    error: str = ""                 # Failure message or collision reason

    def describe(self) -> str:
        arrow = f"`{self.original_path}` -> `{self.new_path}`"
        if self.kind == OutcomeKind.RENAMED:
            return arrow
        if self.kind == OutcomeKind.SKIPPED_DRY_RUN:
            return f"[DRY RUN]: {arrow}"
        if self.kind == OutcomeKind.SKIPPED_COLLISION:
            return f"Skipped {arrow}: {self.error}"
        return f"Failed to rename {arrow}: {self.error}"


@dataclass
class BatchReport:
    """Outcomes of a batch run, in plan order"""
    outcomes: List[Outcome] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def _count(self, kind: OutcomeKind) -> int:
        return sum(1 for o in self.outcomes if o.kind == kind)

    def of_kind(self, kind: OutcomeKind) -> List[Outcome]:
        return [o for o in self.outcomes if o.kind == kind]

    @property
    def renamed_count(self) -> int:
        return self._count(OutcomeKind.RENAMED)

    @property
    def dry_run_count(self) -> int:
        return self._count(OutcomeKind.SKIPPED_DRY_RUN)

    @property
    def collision_count(self) -> int:
        return self._count(OutcomeKind.SKIPPED_COLLISION)

    @property
    def failed_count(self) -> int:
        return self._count(OutcomeKind.FAILED)

    @property
    def has_failures(self) -> bool:
        return self.failed_count > 0

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            f"Batch Result:",
            f"  - Renamed: {self.renamed_count}",
            f"  - Dry run: {self.dry_run_count}",
            f"  - Skipped (collision): {self.collision_count}",
            f"  - Failed: {self.failed_count}",
            f"  - Warnings: {len(self.warnings)}",
        ]
        failed = self.of_kind(OutcomeKind.FAILED)
        if failed:
            lines.append("Failure Details:")
            for o in failed[:10]:  # Show at most 10
                lines.append(f"  - {o.original_path.name} -> {o.new_path.name}: {o.error}")
            if len(failed) > 10:
                lines.append(f"  ... and {len(failed) - 10} more failures")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "renamed_count": self.renamed_count,
            "dry_run_count": self.dry_run_count,
            "collision_count": self.collision_count,
            "failed_count": self.failed_count,
            "outcomes": [
                {
                    "status": o.kind.value,
                    "original": str(o.original_path),
                    "new": str(o.new_path),
                    "error": o.error or None,
                }
                for o in self.outcomes
            ],
            "warnings": list(self.warnings),
        }
