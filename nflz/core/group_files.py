"""
group_files.py - Grouping and Validation

Responsibilities:
- Parse every filename of one directory listing
- Bucket parsed files by shape key (prefix + suffix + extension)
- Exclude files whose number is used twice within a group
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List
import logging

from .errors import ParseError, ValidationError, display_name
from .models_fs import FilenameEntry, ShapeKey, SkippedFile
from .parse_name import parse_filename

logger = logging.getLogger(__name__)


@dataclass
class GroupingResult:
    """Valid groups plus the files that were excluded"""
    groups: Dict[ShapeKey, List[FilenameEntry]] = field(default_factory=dict)
    skipped: List[SkippedFile] = field(default_factory=list)

    @property
    def file_count(self) -> int:
        """Number of files in valid groups"""
        return sum(len(entries) for entries in self.groups.values())


def group_entries(entries: Iterable[FilenameEntry]) -> GroupingResult:
    """
    Group parsed entries by shape key and validate each group

    Entries sharing a number with another entry of the same group are moved
    to the skipped list; the remaining entries of that group are kept.

    Args:
        entries: Parsed filenames of one directory

    Returns:
        Grouping result (each group sorted by value)
    """
    result = GroupingResult()

    buckets: Dict[ShapeKey, List[FilenameEntry]] = defaultdict(list)
    for entry in entries:
        buckets[entry.shape_key].append(entry)

    for key in sorted(buckets):
        by_value: Dict[int, List[FilenameEntry]] = defaultdict(list)
        for entry in buckets[key]:
            by_value[entry.value].append(entry)

        valid: List[FilenameEntry] = []
        for value in sorted(by_value):
            same_value = sorted(by_value[value], key=lambda e: e.original_name)
            if len(same_value) == 1:
                valid.append(same_value[0])
                continue

            names = [e.original_name for e in same_value]
            for entry in same_value:
                others = [n for n in names if n != entry.original_name]
                error = ValidationError.duplicate_index(entry.original_name, value, others)
                logger.info("Skipping file: %s", error)
                result.skipped.append(SkippedFile(filename=entry.original_name, error=error))

        if valid:
            result.groups[key] = valid
            logger.debug("Group '%s': %d files", display_name(key.pattern()), len(valid))

    return result


def group_filenames(filenames: Iterable[str]) -> GroupingResult:
    """
    Parse and group the filenames of one directory listing

    Filenames that can't be parsed are reported in the skipped list and never
    abort the run.

    Args:
        filenames: Filenames (no directory part)

    Returns:
        Grouping result
    """
    entries: List[FilenameEntry] = []
    parse_skipped: List[SkippedFile] = []

    for filename in sorted(filenames):
        try:
            entries.append(parse_filename(filename))
        except ParseError as e:
            logger.info("Skipping file: %s", e)
            parse_skipped.append(SkippedFile(filename=filename, error=e))

    result = group_entries(entries)
    result.skipped = parse_skipped + result.skipped
    return result
