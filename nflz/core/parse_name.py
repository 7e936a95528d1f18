"""
parse_name.py - Filename Parsing

Extracts the numbered group from a filename:

    "paris (12).jpg"  ->  prefix "paris (", value 12, suffix ").jpg"
"""

from pathlib import PurePath
import logging
import re

from .errors import ParseError, display_name
from .models_fs import FilenameEntry

logger = logging.getLogger(__name__)

# ASCII digits only; str.isdigit() would also accept other scripts
NUMBERED_GROUP_RE = re.compile(r"\(([0-9]+)\)")


def parse_filename(filename: str) -> FilenameEntry:
    """
    Parse a filename that includes exactly one numbered group

    Args:
        filename: Filename (without directory)

    Returns:
        Parsed entry

    Raises:
        ParseError: If the filename has no numbered group or more than one
    """
    matches = list(NUMBERED_GROUP_RE.finditer(filename))
    if not matches:
        raise ParseError.no_numbered_group(filename)
    if len(matches) > 1:
        raise ParseError.multiple_numbered_groups(filename, len(matches))

    match = matches[0]
    # Group 1 excludes the parentheses, they stay in prefix/suffix
    begin, end = match.span(1)
    number_text = match.group(1)

    entry = FilenameEntry(
        original_name=filename,
        prefix=filename[:begin],
        suffix=filename[end:],
        value=int(number_text),
        number_text=number_text,
        extension=PurePath(filename).suffix,
    )
    logger.debug("Parsed '%s': prefix=%r value=%d suffix=%r", display_name(filename), entry.prefix, entry.value, entry.suffix)
    return entry


def count_digits(value: int) -> int:
    """
    Number of decimal digits of a non-negative number

    0 -> 1, 9 -> 1, 10 -> 2, 999 -> 3
    """
    if value < 0:
        raise ValueError(f"Value must not be negative: {value}")
    return len(str(value))
