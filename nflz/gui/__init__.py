"""
gui - PySide6 Interface for nflz
"""

from .gui_entry import main

__all__ = ["main"]
