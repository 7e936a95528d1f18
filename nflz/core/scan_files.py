"""
scan_files.py - File Scanning Module

Provides non-recursive listing of one directory
"""

from pathlib import Path
from typing import List, Set
import logging

from .errors import DirectoryReadError, display_name
from .models_fs import normalize_for_comparison

logger = logging.getLogger(__name__)


def _resolve_directory(directory: Path) -> Path:
    """Resolve directory or raise DirectoryReadError"""
    directory = Path(directory).resolve()
    if not directory.is_dir():
        raise DirectoryReadError(str(directory), "not a directory or does not exist")
    return directory


def list_filenames(directory: Path, include_hidden: bool = False) -> List[str]:
    """
    List the names of regular files in a single directory (non-recursive)

    Args:
        directory: Target directory
        include_hidden: Whether to include hidden files

    Returns:
        Sorted filename list

    Raises:
        DirectoryReadError: If the directory can't be read
    """
    directory = _resolve_directory(directory)

    names: List[str] = []
    try:
        for item in directory.iterdir():
            # Only process files, not directories
            if not item.is_file():
                continue

            # Skip hidden files
            if not include_hidden and item.name.startswith('.'):
                continue

            names.append(item.name)
    except OSError as e:
        raise DirectoryReadError(str(directory), str(e)) from e

    logger.debug("Listed %d files in %s", len(names), display_name(str(directory)))
    return sorted(names)


def get_existing_names(directory: Path, case_insensitive: bool = True) -> Set[str]:
    """
    Get set of existing entry names in directory (for conflict detection)

    Directories and hidden files are included, since a rename onto them
    must fail as well.

    Args:
        directory: Target directory
        case_insensitive: Whether case-insensitive

    Returns:
        Name set (normalized)
    """
    directory = _resolve_directory(directory)

    try:
        return {normalize_for_comparison(item.name, case_insensitive) for item in directory.iterdir()}
    except OSError as e:
        raise DirectoryReadError(str(directory), str(e)) from e
