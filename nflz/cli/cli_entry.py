"""
cli_entry.py - CLI Entry Point

Supports:
- Command-line argument mode (pad one directory)
- Interactive mode (--interactive)
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from nflz.core.errors import display_name

from .log_setup import setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="nflz",
        description="Pad the numbered group of filenames like 'paris (1).jpg' with leading zeros",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Pad files in the current directory
  nflz

  # Preview only
  nflz ./photos --dry-run

  # Rename without asking
  nflz ./photos --yes

  # Interactive mode
  nflz --interactive
"""
    )

    parser.add_argument("directory", type=str, nargs="?", default=None,
                        help="Target directory (default: current directory)")
    parser.add_argument("--dry-run", "-d", action="store_true", help="Preview only, do not execute")
    parser.add_argument("--yes", "-y", action="store_true", help="Skip confirmation")
    parser.add_argument("--include-hidden", action="store_true", help="Include hidden files")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logging")
    parser.add_argument("--interactive", "-i", action="store_true", help="Interactive mode")

    case_group = parser.add_mutually_exclusive_group()
    case_group.add_argument("--case-sensitive", dest="case_insensitive", action="store_false", default=None,
                            help="Compare names case-sensitively when checking for conflicts")
    case_group.add_argument("--case-insensitive", dest="case_insensitive", action="store_true", default=None,
                            help="Compare names case-insensitively when checking for conflicts")

    return parser


def print_plan(plan) -> None:
    """Print the plan: unchanged files, renames and skipped files"""
    print(f"Directory: {display_name(str(plan.directory))}")
    print()

    if plan.already_correct:
        print(f"Already correct ({len(plan.already_correct)}):")
        for entry in plan.already_correct:
            print(f"  {display_name(entry.original_name)}")
        print()

    if plan.to_rename:
        print(f"Will rename ({plan.total_count}):")
        print("-" * 80)
        for rename in plan.to_rename:
            print(f"  {display_name(rename.old_name):<40} -> {display_name(rename.new_name)}")
        print("-" * 80)
        print()

    if plan.skipped:
        print(f"Skipped ({len(plan.skipped)}):")
        for skipped in plan.skipped:
            print(f"  {display_name(skipped.filename)}: {skipped.reason}")
        print()

    print(plan.summary())


def confirm_plan(plan, assume_yes: bool = False) -> bool:
    """Ask the user to accept the plan"""
    if assume_yes:
        return True
    try:
        answer = input(f"\nRename {plan.total_count} files? (y/N): ").strip().lower()
    except EOFError:
        # stdin closed, nothing to confirm with
        print()
        return False
    return answer == 'y'


def cmd_pad(args) -> int:
    """Handle padding of one directory"""
    from nflz.core import (
        analyze_directory, check_can_rename_all, execute_plan,
        NflzOptions, DirectoryReadError, ExecutionError,
    )

    options = NflzOptions(
        include_hidden=args.include_hidden,
        dry_run=args.dry_run,
        assume_yes=args.yes,
    )
    if args.case_insensitive is not None:
        options.case_insensitive_detect = args.case_insensitive

    directory = Path(args.directory or Path.cwd()).expanduser()

    try:
        plan = analyze_directory(directory, options)
    except DirectoryReadError as e:
        print(f"Error: {e}")
        return 1

    print_plan(plan)

    if plan.is_empty:
        print("\nNo files need renaming")
        return 0

    try:
        check_can_rename_all(plan, case_insensitive=options.case_insensitive_detect)
    except ExecutionError as e:
        print(f"\nError: {e}")
        return 1

    if options.dry_run:
        print("\n[Preview mode] Will not actually execute")
        return 0

    confirmed = confirm_plan(plan, options.assume_yes)

    try:
        report = execute_plan(plan, confirmed, options=options)
    except ExecutionError as e:
        print(f"\nError: {e}")
        return 1

    print()
    print(report.summary())

    return 0 if report.failed_count == 0 else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.interactive:
        from .cli_interactive import interactive_mode
        return interactive_mode()

    return cmd_pad(args)


if __name__ == "__main__":
    sys.exit(main())
