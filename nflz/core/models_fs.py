"""
models_fs.py - Core Data Structure Definitions

Contains:
- FilenameEntry: Parsed filename with its numbered group
- ShapeKey: Key that identifies which files belong to one group
- RenamePlanEntry: Single planned rename
- SkippedFile: File excluded from the plan, with reason
- DirectoryPlan: Rename plan for one directory
- NflzOptions: Options configuration
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, List, Dict, NamedTuple
import platform

from .errors import NflzError


class ShapeKey(NamedTuple):
    """Literal parts shared by all files of one group"""
    prefix: str                     # Text before the number, "(" included
    suffix: str                     # Text after the number, ")" and extension included
    extension: str                  # e.g. ".jpg" (may be empty)

    def pattern(self) -> str:
        """Human-readable pattern, e.g. 'paris (#).jpg'"""
        return f"{self.prefix}#{self.suffix}"


@dataclass(frozen=True)
class FilenameEntry:
    """Filename with exactly one numbered group"""
    original_name: str              # e.g. "paris (12).jpg"
    prefix: str                     # "paris ("
    suffix: str                     # ").jpg"
    value: int                      # 12
    number_text: str                # "12" (raw digits, may have leading zeros)
    extension: str                  # ".jpg"

    @property
    def shape_key(self) -> ShapeKey:
        return ShapeKey(self.prefix, self.suffix, self.extension)

    def with_width(self, width: int) -> str:
        """Filename with the number zero-padded to width"""
        return f"{self.prefix}{str(self.value).zfill(width)}{self.suffix}"


@dataclass
class RenamePlanEntry:
    """Single rename operation"""
    entry: FilenameEntry
    target_width: int
    new_name: str

    @property
    def old_name(self) -> str:
        return self.entry.original_name


@dataclass
class SkippedFile:
    """File excluded from renaming"""
    filename: str
    error: NflzError

    @property
    def reason(self) -> str:
        return self.error.message


@dataclass
class NflzOptions:
    """Options configuration"""
    # Case-sensitive detection (Windows/macOS default to insensitive)
    case_insensitive_detect: bool = field(default_factory=lambda: is_case_insensitive_fs())

    # Listing options
    include_hidden: bool = False    # Whether to include hidden files

    # Execution options
    dry_run: bool = False           # Preview only, do not actually execute
    assume_yes: bool = False        # Do not ask for confirmation


@dataclass
class DirectoryPlan:
    """Rename plan for one directory"""
    directory: Optional[Path] = None
    to_rename: List[RenamePlanEntry] = field(default_factory=list)
    already_correct: List[FilenameEntry] = field(default_factory=list)
    skipped: List[SkippedFile] = field(default_factory=list)
    group_widths: Dict[ShapeKey, int] = field(default_factory=dict)

    @property
    def total_count(self) -> int:
        """Number of files to rename"""
        return len(self.to_rename)

    @property
    def is_empty(self) -> bool:
        """Whether nothing needs to be renamed"""
        return not self.to_rename

    def add_rename(self, entry: FilenameEntry, target_width: int, new_name: str) -> None:
        """Add rename"""
        self.to_rename.append(RenamePlanEntry(entry=entry, target_width=target_width, new_name=new_name))

    def add_skipped(self, filename: str, error: NflzError) -> None:
        """Add skipped file"""
        self.skipped.append(SkippedFile(filename=filename, error=error))

    def extend(self, fragment: "DirectoryPlan") -> None:
        """Merge a plan fragment (e.g. one group) into this plan"""
        self.to_rename.extend(fragment.to_rename)
        self.already_correct.extend(fragment.already_correct)
        self.skipped.extend(fragment.skipped)
        self.group_widths.update(fragment.group_widths)

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            f"Rename Plan Summary:",
            f"  - Groups: {len(self.group_widths)}",
            f"  - To rename: {self.total_count}",
            f"  - Already correct: {len(self.already_correct)}",
            f"  - Skipped: {len(self.skipped)}",
        ]
        return "\n".join(lines)


def is_case_insensitive_fs() -> bool:
    """Detect if current filesystem is case-insensitive"""
    return platform.system() in ("Windows", "Darwin")


def normalize_for_comparison(name: str, case_insensitive: bool) -> str:
    """Normalize filename for comparison"""
    if case_insensitive:
        return name.casefold()
    return name
