"""
plan_rename.py - Rename Plan Generation Module

Responsibilities:
- Compute the padding width of each group
- Generate target names with leading zeros
- Output DirectoryPlan
"""

from pathlib import Path
from typing import List, Optional
import logging

from .errors import display_name
from .models_fs import FilenameEntry, DirectoryPlan, NflzOptions
from .parse_name import count_digits
from .group_files import GroupingResult, group_filenames
from .scan_files import list_filenames

logger = logging.getLogger(__name__)


def compute_target_width(entries: List[FilenameEntry]) -> int:
    """
    Padding width of a group: digit count of the largest number

    Args:
        entries: Entries of one group

    Returns:
        Width (at least 1)
    """
    if not entries:
        return 1
    return count_digits(max(e.value for e in entries))


def plan_group(entries: List[FilenameEntry]) -> DirectoryPlan:
    """
    Generate the plan fragment for one group

    Args:
        entries: Entries sharing one shape key, with distinct values

    Returns:
        Plan fragment ordered by value
    """
    fragment = DirectoryPlan()
    if not entries:
        return fragment

    width = compute_target_width(entries)
    fragment.group_widths[entries[0].shape_key] = width

    for entry in sorted(entries, key=lambda e: e.value):
        new_name = entry.with_width(width)

        # Avoid unnecessary renames
        if new_name == entry.original_name:
            fragment.already_correct.append(entry)
        else:
            fragment.add_rename(entry, width, new_name)

    logger.debug(
        "Group '%s': width %d, %d to rename, %d already correct",
        display_name(entries[0].shape_key.pattern()), width,
        len(fragment.to_rename), len(fragment.already_correct),
    )
    return fragment


def plan_directory(grouping: GroupingResult, directory: Optional[Path] = None) -> DirectoryPlan:
    """
    Generate the plan for all groups of one directory

    Args:
        grouping: Grouped and validated files
        directory: Directory the files live in

    Returns:
        Rename plan
    """
    plan = DirectoryPlan(directory=directory)

    for key in sorted(grouping.groups):
        plan.extend(plan_group(grouping.groups[key]))

    for skipped in grouping.skipped:
        plan.add_skipped(skipped.filename, skipped.error)
    return plan


def analyze_directory(directory: Path, options: Optional[NflzOptions] = None) -> DirectoryPlan:
    """
    List, parse, group and plan one directory

    Args:
        directory: Target directory
        options: Options

    Returns:
        Rename plan

    Raises:
        DirectoryReadError: If the directory can't be read
    """
    if options is None:
        options = NflzOptions()

    directory = Path(directory).resolve()
    filenames = list_filenames(directory, include_hidden=options.include_hidden)
    grouping = group_filenames(filenames)

    plan = plan_directory(grouping, directory)
    logger.info(
        "Analyzed %s: %d to rename, %d already correct, %d skipped",
        display_name(str(directory)), plan.total_count, len(plan.already_correct), len(plan.skipped),
    )
    return plan
