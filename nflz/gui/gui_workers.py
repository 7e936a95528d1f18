"""
gui_workers.py - GUI Worker Threads

Provides background execution of long tasks to avoid blocking UI
"""

from pathlib import Path
from typing import Optional

from PySide6.QtCore import QThread, Signal, QObject

from nflz.core import (
    analyze_directory, execute_plan,
    NflzOptions, DirectoryPlan,
)


class PlanWorker(QThread):
    """Rename plan generation worker thread"""

    # Signals
    progress = Signal(str)              # Progress message
    finished = Signal(object)           # DirectoryPlan
    error = Signal(str)                 # Error message

    def __init__(
        self,
        directory: Path,
        options: Optional[NflzOptions] = None,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.directory = directory
        self.options = options or NflzOptions()

    def run(self):
        try:
            self.progress.emit("Analyzing directory...")
            plan = analyze_directory(self.directory, self.options)
            self.finished.emit(plan)
        except Exception as e:
            self.error.emit(str(e))


class RenameWorker(QThread):
    """Rename execution worker thread"""

    # Signals
    progress = Signal(int, int, str)    # current, total, message
    finished = Signal(object)           # RenameReport
    error = Signal(str)                 # Error message

    def __init__(
        self,
        plan: DirectoryPlan,
        options: Optional[NflzOptions] = None,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.plan = plan
        self.options = options or NflzOptions()

    def run(self):
        try:
            def progress_callback(current: int, total: int, msg: str):
                self.progress.emit(current, total, msg)

            # The window asked for confirmation before starting this worker
            report = execute_plan(
                self.plan,
                confirm=True,
                progress_callback=progress_callback,
                options=self.options,
            )

            self.finished.emit(report)
        except Exception as e:
            self.error.emit(str(e))
