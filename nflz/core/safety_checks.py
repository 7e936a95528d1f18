"""
safety_checks.py - Safety Check Module

Provides checks before file operations:
- Pre-flight collision check over the whole plan
- Per-file checks right before each rename
"""

from collections import Counter
from pathlib import Path
from typing import Tuple, Optional, List, Set
import logging
import os
import platform

from .errors import ExecutionError
from .models_fs import DirectoryPlan, is_case_insensitive_fs, normalize_for_comparison
from .scan_files import get_existing_names

logger = logging.getLogger(__name__)


def check_writable(path: Path) -> Tuple[bool, Optional[str]]:
    """
    Check if path is writable

    Args:
        path: Path to check

    Returns:
        (is_writable, error_reason)
    """
    if path.exists():
        # File exists, check if writable
        if not os.access(path, os.W_OK):
            return False, f"File is not writable: {path}"
    else:
        # File doesn't exist, check if parent directory is writable
        parent = path.parent
        if not parent.exists():
            return False, f"Parent directory does not exist: {parent}"
        if not os.access(parent, os.W_OK):
            return False, f"Directory is not writable: {parent}"

    return True, None


def check_path_length(path: Path, max_length: int = 260) -> Tuple[bool, Optional[str]]:
    """
    Check if path length exceeds limit (mainly for Windows)

    Args:
        path: Path to check
        max_length: Maximum length

    Returns:
        (is_valid, error_reason)
    """
    path_str = str(path)
    if len(path_str) > max_length:
        return False, f"Path length ({len(path_str)}) exceeds limit ({max_length}): {path}"
    return True, None


def check_rename_op(src: Path, dst: Path) -> Tuple[bool, Optional[str]]:
    """
    Check if a single rename operation is safe

    Args:
        src: Source path
        dst: Destination path

    Returns:
        (is_safe, error_reason)
    """
    # Check if source file exists
    if not src.exists():
        return False, f"Source file does not exist: {src}"

    # Check if source is a file
    if not src.is_file():
        return False, f"Source path is not a file: {src}"

    # os.rename silently replaces files on POSIX
    if dst.exists():
        return False, f"Target already exists: {dst}"

    # Check path length
    if platform.system() == "Windows":
        valid, error = check_path_length(dst)
        if not valid:
            return False, error

    # Check writability (renaming needs write access to the directory)
    valid, error = check_writable(src.parent)
    if not valid:
        return False, error

    return True, None


def find_collisions(
    plan: DirectoryPlan,
    existing_names: Set[str],
    case_insensitive: bool,
) -> List[str]:
    """
    Find planned names that collide with each other or with existing entries

    Args:
        plan: Rename plan
        existing_names: Names present in the directory (normalized)
        case_insensitive: Whether case-insensitive

    Returns:
        Colliding new names (sorted, deduplicated)
    """
    normalized = [normalize_for_comparison(r.new_name, case_insensitive) for r in plan.to_rename]
    counts = Counter(normalized)

    collisions: Set[str] = set()
    for rename, key in zip(plan.to_rename, normalized):
        own = normalize_for_comparison(rename.old_name, case_insensitive)
        if counts[key] > 1:
            collisions.add(rename.new_name)
        elif key in existing_names and key != own:
            collisions.add(rename.new_name)

    return sorted(collisions)


def check_can_rename_all(
    plan: DirectoryPlan,
    existing_names: Optional[Set[str]] = None,
    case_insensitive: Optional[bool] = None,
) -> None:
    """
    Verify that all files can be renamed without conflict

    Args:
        plan: Rename plan
        existing_names: Names present in the directory (normalized);
            read from plan.directory if not given
        case_insensitive: Whether case-insensitive (detected if not given)

    Raises:
        ExecutionError: NAME_COLLISION if any planned name is taken
    """
    if case_insensitive is None:
        case_insensitive = is_case_insensitive_fs()

    if existing_names is None:
        if plan.directory is None:
            existing_names = set()
        else:
            existing_names = get_existing_names(plan.directory, case_insensitive)

    collisions = find_collisions(plan, existing_names, case_insensitive)
    if collisions:
        error = ExecutionError.name_collision(collisions)
        logger.error("%s", error)
        raise error
