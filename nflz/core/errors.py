"""
errors.py - Error Kinds

Every error carries an ErrorKind tag so callers can tell the per-file kinds
(recorded and reported) from the run-fatal ones (raised).
"""

import os
from enum import Enum
from typing import Optional, List


def display_name(name) -> str:
    """Printable form of a filename; undecodable bytes are shown as \\xNN escapes"""
    return os.fsencode(name).decode("utf-8", "backslashreplace")


class ErrorKind(Enum):
    """Error kind enumeration"""
    NO_NUMBERED_GROUP = "no_numbered_group"                  # Parse: zero "(123)" groups
    MULTIPLE_NUMBERED_GROUPS = "multiple_numbered_groups"    # Parse: more than one group
    DUPLICATE_INDEX = "duplicate_index"                      # Validation: same value twice in a group
    NAME_COLLISION = "name_collision"                        # Execution: pre-flight check failed
    FILESYSTEM_FAILURE = "filesystem_failure"                # Execution: single rename failed
    DIRECTORY_UNREADABLE = "directory_unreadable"            # Listing the directory failed


class NflzError(Exception):
    """Base class for all errors of this package"""

    def __init__(self, kind: ErrorKind, message: str, filename: Optional[str] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.filename = filename


class ParseError(NflzError):
    """A filename does not include exactly one numbered group"""

    @classmethod
    def no_numbered_group(cls, filename: str) -> "ParseError":
        return cls(
            ErrorKind.NO_NUMBERED_GROUP,
            f"'{display_name(filename)}' must include exactly one numbered group; found 0",
            filename,
        )

    @classmethod
    def multiple_numbered_groups(cls, filename: str, found: int) -> "ParseError":
        return cls(
            ErrorKind.MULTIPLE_NUMBERED_GROUPS,
            f"'{display_name(filename)}' must include exactly one numbered group; found {found}",
            filename,
        )


class ValidationError(NflzError):
    """Files of one group share the same number"""

    @classmethod
    def duplicate_index(cls, filename: str, value: int, others: List[str]) -> "ValidationError":
        return cls(
            ErrorKind.DUPLICATE_INDEX,
            f"'{display_name(filename)}' has index {value} which is also used by: "
            f"{', '.join(display_name(o) for o in others)}",
            filename,
        )


class ExecutionError(NflzError):
    """Rename execution error"""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        filename: Optional[str] = None,
        conflicts: Optional[List[str]] = None,
    ):
        super().__init__(kind, message, filename)
        self.conflicts = conflicts or []

    @classmethod
    def name_collision(cls, conflicts: List[str]) -> "ExecutionError":
        return cls(
            ErrorKind.NAME_COLLISION,
            f"Can't rename files because {len(conflicts)} new file names are in conflict "
            f"with existing or other planned names: {', '.join(display_name(c) for c in conflicts)}",
            conflicts=conflicts,
        )

    @classmethod
    def filesystem_failure(cls, filename: str, new_name: str, reason: str) -> "ExecutionError":
        return cls(
            ErrorKind.FILESYSTEM_FAILURE,
            f"Can't rename '{display_name(filename)}' to '{display_name(new_name)}': {display_name(reason)}",
            filename,
        )


class DirectoryReadError(NflzError):
    """The target directory can't be listed"""

    def __init__(self, directory: str, reason: str):
        super().__init__(
            ErrorKind.DIRECTORY_UNREADABLE,
            f"The directory '{display_name(directory)}' or the files in it can't be read: {display_name(reason)}",
            directory,
        )
