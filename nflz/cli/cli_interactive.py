"""
cli_interactive.py - Interactive CLI

Provides a menu-style interactive interface
"""

import os
import sys
from pathlib import Path
from typing import Optional

from nflz.core import (
    analyze_directory, check_can_rename_all, execute_plan,
    NflzOptions, DirectoryReadError, ExecutionError,
)

from .cli_entry import print_plan


def clear_screen():
    """Clear screen"""
    os.system('cls' if os.name == 'nt' else 'clear')


def print_header(title: str):
    """Print header"""
    print()
    print("=" * 60)
    print(f"  {title}")
    print("=" * 60)
    print()


def input_directory(prompt: str = "Please enter directory path") -> Optional[Path]:
    """Input and validate directory"""
    while True:
        path_str = input(f"{prompt} (q to return): ").strip()
        if path_str.lower() == 'q':
            return None

        path = Path(path_str or ".").expanduser().resolve()
        if path.is_dir():
            return path
        else:
            print(f"Error: Directory does not exist: {path}")


def input_bool(prompt: str, default: bool = False) -> bool:
    """Input boolean value"""
    default_str = "Y/n" if default else "y/N"
    value = input(f"{prompt} ({default_str}): ").strip().lower()
    if not value:
        return default
    return value == 'y'


def menu_pad_directory(execute: bool = True):
    """Pad directory menu"""
    print_header("Pad Numbered Filenames" if execute else "Preview Directory")

    directory = input_directory("Please enter target directory")
    if directory is None:
        return

    options = NflzOptions(include_hidden=input_bool("Include hidden files", default=False))

    try:
        plan = analyze_directory(directory, options)
    except DirectoryReadError as e:
        print(f"Error: {e}")
        input("Press Enter to return...")
        return

    print()
    print_plan(plan)

    if plan.is_empty:
        print("\nNo files need renaming")
        input("Press Enter to return...")
        return

    if not execute:
        input("\nPress Enter to return...")
        return

    try:
        check_can_rename_all(plan, case_insensitive=options.case_insensitive_detect)
    except ExecutionError as e:
        print(f"\nError: {e}")
        input("Press Enter to return...")
        return

    print()
    confirmed = input_bool("Confirm execution", default=False)

    if confirmed:
        print("\nExecuting...")

    try:
        report = execute_plan(plan, confirmed, options=options)
    except ExecutionError as e:
        print(f"Error: {e}")
        input("Press Enter to return...")
        return

    print(report.summary())

    input("\nPress Enter to return...")


def interactive_mode() -> int:
    """Interactive mode main loop"""
    while True:
        clear_screen()
        print_header("nflz - Numbered Filenames with Leading Zeroes")

        print("Please select function:")
        print()
        print("  1. Preview directory")
        print("  2. Pad numbered filenames")
        print()
        print("  q. Exit")
        print()

        choice = input("Please select (1/2/q): ").strip().lower()

        if choice == 'q':
            print("Goodbye!")
            return 0
        elif choice == '1':
            menu_pad_directory(execute=False)
        elif choice == '2':
            menu_pad_directory(execute=True)
        else:
            print("Invalid choice")
            input("Press Enter to continue...")


if __name__ == "__main__":
    sys.exit(interactive_mode())
