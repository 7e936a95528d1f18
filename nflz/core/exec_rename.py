"""
exec_rename.py - Rename Execution Module

Responsibilities:
- Confirmation gate and pre-flight collision check
- Single-pass execution with per-file error isolation
"""

from pathlib import Path
from typing import List, Tuple, Optional, Callable
from dataclasses import dataclass, field
import logging
import os

from .errors import ExecutionError, display_name
from .models_fs import DirectoryPlan, RenamePlanEntry, NflzOptions
from .safety_checks import check_can_rename_all, check_rename_op

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, str], None]
RenameFunc = Callable[[Path, Path], None]


@dataclass
class RenameReport:
    """Rename execution result"""
    confirmed: bool = False
    renamed: List[RenamePlanEntry] = field(default_factory=list)
    failed: List[Tuple[RenamePlanEntry, ExecutionError]] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.renamed)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    def summary(self) -> str:
        """Generate summary"""
        if not self.confirmed:
            return "Execution Result:\n  - Cancelled, no files were renamed"

        lines = [
            f"Execution Result:",
            f"  - Renamed: {self.success_count}",
            f"  - Failed: {self.failed_count}",
        ]
        if self.failed:
            lines.append("Failure Details:")
            for _, error in self.failed[:10]:  # Show at most 10
                lines.append(f"  - {error.message}")
            if len(self.failed) > 10:
                lines.append(f"  ... and {len(self.failed) - 10} more failures")
        return "\n".join(lines)


def execute_plan(
    plan: DirectoryPlan,
    confirm: bool,
    progress_callback: Optional[ProgressCallback] = None,
    rename_func: RenameFunc = os.rename,
    options: Optional[NflzOptions] = None,
) -> RenameReport:
    """
    Execute rename plan

    Nothing is touched unless confirm is True and the collision check passes.
    A failing file is recorded and the remaining files are still renamed.

    Args:
        plan: Rename plan (plan.directory must be set)
        confirm: Whether the user accepted the plan
        progress_callback: Progress callback (current, total, message)
        rename_func: Performs a single rename (src, dst)
        options: Options

    Returns:
        Execution report

    Raises:
        ExecutionError: NAME_COLLISION before any rename took place
    """
    if options is None:
        options = NflzOptions()

    report = RenameReport(confirmed=confirm)
    if not confirm:
        logger.info("Rename declined, %d files left untouched", plan.total_count)
        return report

    total = plan.total_count
    if total == 0:
        return report

    if plan.directory is None:
        raise ValueError("Plan has no directory, can't execute it")
    directory = Path(plan.directory)

    check_can_rename_all(plan, case_insensitive=options.case_insensitive_detect)

    for i, rename in enumerate(plan.to_rename):
        if progress_callback:
            progress_callback(i + 1, total, f"{display_name(rename.old_name)} -> {display_name(rename.new_name)}")

        src = directory / rename.old_name
        dst = directory / rename.new_name

        valid, reason = check_rename_op(src, dst)
        if not valid:
            error = ExecutionError.filesystem_failure(rename.old_name, rename.new_name, reason)
            logger.warning("%s", error)
            report.failed.append((rename, error))
            continue

        try:
            rename_func(src, dst)
        except OSError as e:
            error = ExecutionError.filesystem_failure(rename.old_name, rename.new_name, str(e))
            logger.warning("%s", error)
            report.failed.append((rename, error))
            continue

        logger.info("Renamed '%s' -> '%s'", display_name(rename.old_name), display_name(rename.new_name))
        report.renamed.append(rename)

    return report
