"""
core - nflz Core Module

Provides filename parsing, grouping, padding plan generation and execution.
"""

from .errors import (
    ErrorKind,
    NflzError,
    ParseError,
    ValidationError,
    ExecutionError,
    DirectoryReadError,
    display_name,
)

from .models_fs import (
    FilenameEntry,
    ShapeKey,
    RenamePlanEntry,
    SkippedFile,
    DirectoryPlan,
    NflzOptions,
)

from .parse_name import (
    parse_filename,
    count_digits,
)

from .group_files import (
    GroupingResult,
    group_entries,
    group_filenames,
)

from .scan_files import (
    list_filenames,
    get_existing_names,
)

from .plan_rename import (
    compute_target_width,
    plan_group,
    plan_directory,
    analyze_directory,
)

from .exec_rename import (
    execute_plan,
    RenameReport,
)

from .safety_checks import (
    check_can_rename_all,
    check_rename_op,
)

__all__ = [
    # Errors
    "ErrorKind",
    "NflzError",
    "ParseError",
    "ValidationError",
    "ExecutionError",
    "DirectoryReadError",
    "display_name",

    # Data models
    "FilenameEntry",
    "ShapeKey",
    "RenamePlanEntry",
    "SkippedFile",
    "DirectoryPlan",
    "NflzOptions",
    "RenameReport",

    # Parsing
    "parse_filename",
    "count_digits",

    # Grouping
    "GroupingResult",
    "group_entries",
    "group_filenames",

    # Scanning
    "list_filenames",
    "get_existing_names",

    # Planning
    "compute_target_width",
    "plan_group",
    "plan_directory",
    "analyze_directory",

    # Execution
    "execute_plan",

    # Safety checks
    "check_can_rename_all",
    "check_rename_op",
]
