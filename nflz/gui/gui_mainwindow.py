"""
gui_mainwindow.py - GUI Main Window

Select a directory, preview the padding plan and execute it.
"""

from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QLineEdit, QPushButton, QCheckBox, QTableWidget,
    QTableWidgetItem, QProgressBar, QFileDialog, QMessageBox,
    QHeaderView, QGroupBox
)
from PySide6.QtCore import Slot
from PySide6.QtGui import QColor

from nflz.core import DirectoryPlan, RenameReport, NflzOptions, display_name
from .gui_workers import PlanWorker, RenameWorker


class PadWidget(QWidget):
    """Directory selection, plan preview and execution"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.plan: Optional[DirectoryPlan] = None
        self.options = NflzOptions()
        self.plan_worker: Optional[PlanWorker] = None
        self.rename_worker: Optional[RenameWorker] = None

        self._init_ui()

    def _init_ui(self):
        layout = QVBoxLayout(self)

        # Directory settings group
        dir_group = QGroupBox("Directory Settings")
        dir_layout = QGridLayout(dir_group)

        dir_layout.addWidget(QLabel("Directory:"), 0, 0)
        self.dir_edit = QLineEdit()
        self.dir_edit.setPlaceholderText("Select target directory (non-recursive)...")
        dir_layout.addWidget(self.dir_edit, 0, 1)
        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.clicked.connect(self._browse_directory)
        dir_layout.addWidget(self.browse_btn, 0, 2)

        self.hidden_check = QCheckBox("Include Hidden Files")
        dir_layout.addWidget(self.hidden_check, 1, 0, 1, 3)

        self.preview_btn = QPushButton("Preview")
        self.preview_btn.clicked.connect(self._do_preview)
        dir_layout.addWidget(self.preview_btn, 2, 0, 1, 3)

        layout.addWidget(dir_group)

        # Results table
        self.table = QTableWidget()
        self.table.setColumnCount(3)
        self.table.setHorizontalHeaderLabels(["Original Name", "New Name", "Status"])
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(2, QHeaderView.ResizeMode.Stretch)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        layout.addWidget(self.table, 1)

        # Progress and execution
        bottom_layout = QHBoxLayout()

        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        bottom_layout.addWidget(self.progress_bar, 1)

        self.execute_btn = QPushButton("Execute Rename")
        self.execute_btn.clicked.connect(self._do_execute)
        self.execute_btn.setEnabled(False)
        self.execute_btn.setStyleSheet("QPushButton { background-color: #4CAF50; color: white; font-weight: bold; padding: 8px 16px; }")
        bottom_layout.addWidget(self.execute_btn)

        layout.addLayout(bottom_layout)

        # Status label
        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

    def _browse_directory(self):
        """Browse and select directory"""
        directory = QFileDialog.getExistingDirectory(self, "Select Directory")
        if directory:
            self.dir_edit.setText(directory)

    def _do_preview(self):
        """Generate preview"""
        directory = self.dir_edit.text().strip()
        if not directory:
            QMessageBox.warning(self, "Warning", "Please select a directory first")
            return

        path = Path(directory)
        if not path.is_dir():
            QMessageBox.warning(self, "Warning", f"Directory does not exist: {directory}")
            return

        self.options.include_hidden = self.hidden_check.isChecked()

        self.preview_btn.setEnabled(False)
        self.preview_btn.setText("Analyzing...")
        self.execute_btn.setEnabled(False)

        self.plan_worker = PlanWorker(path, options=self.options)
        self.plan_worker.progress.connect(self.status_label.setText)
        self.plan_worker.finished.connect(self._on_plan_finished)
        self.plan_worker.error.connect(self._on_plan_error)
        self.plan_worker.start()

    @Slot(object)
    def _on_plan_finished(self, plan: DirectoryPlan):
        """Plan generation complete"""
        self.plan = plan
        self.preview_btn.setEnabled(True)
        self.preview_btn.setText("Preview")

        self._update_table_preview()

        if plan.to_rename:
            self.execute_btn.setEnabled(True)
            self.status_label.setText(
                f"Will rename {plan.total_count} files "
                f"({len(plan.already_correct)} already correct, {len(plan.skipped)} skipped)"
            )
        else:
            self.status_label.setText("No files need renaming")

    @Slot(str)
    def _on_plan_error(self, error: str):
        """Plan generation error"""
        self.preview_btn.setEnabled(True)
        self.preview_btn.setText("Preview")
        QMessageBox.critical(self, "Error", f"Failed to generate preview: {error}")

    def _set_row(self, row: int, old_name: str, new_name: str, status: str, color: QColor):
        self.table.setItem(row, 0, QTableWidgetItem(display_name(old_name)))
        self.table.setItem(row, 1, QTableWidgetItem(display_name(new_name)))
        status_item = QTableWidgetItem(status)
        status_item.setForeground(color)
        self.table.setItem(row, 2, status_item)

    def _update_table_preview(self):
        """Update table to display preview results"""
        if not self.plan:
            return

        plan = self.plan
        self.table.setRowCount(len(plan.to_rename) + len(plan.already_correct) + len(plan.skipped))

        row = 0
        for rename in plan.to_rename:
            self._set_row(row, rename.old_name, rename.new_name, "Will Rename", QColor(0, 150, 0))
            row += 1
        for entry in plan.already_correct:
            self._set_row(row, entry.original_name, entry.original_name, "No Change", QColor(150, 150, 150))
            row += 1
        for skipped in plan.skipped:
            self._set_row(row, skipped.filename, "", f"Skipped: {skipped.reason}", QColor(200, 150, 0))
            row += 1

    def _do_execute(self):
        """Execute rename"""
        if not self.plan or not self.plan.to_rename:
            return

        # Confirm
        reply = QMessageBox.question(
            self, "Confirm",
            f"Are you sure you want to rename {self.plan.total_count} files?\n\nThis action cannot be undone!",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        if reply != QMessageBox.StandardButton.Yes:
            self.status_label.setText("Cancelled, no files were renamed")
            return

        self.execute_btn.setEnabled(False)
        self.execute_btn.setText("Executing...")
        self.preview_btn.setEnabled(False)
        self.progress_bar.setVisible(True)
        self.progress_bar.setRange(0, self.plan.total_count)

        self.rename_worker = RenameWorker(self.plan, options=self.options)
        self.rename_worker.progress.connect(self._on_rename_progress)
        self.rename_worker.finished.connect(self._on_rename_finished)
        self.rename_worker.error.connect(self._on_rename_error)
        self.rename_worker.start()

    @Slot(int, int, str)
    def _on_rename_progress(self, current: int, total: int, msg: str):
        """Execution progress update"""
        self.progress_bar.setValue(current)
        self.status_label.setText(msg)

    @Slot(object)
    def _on_rename_finished(self, report: RenameReport):
        """Execution complete"""
        self.execute_btn.setEnabled(False)
        self.execute_btn.setText("Execute Rename")
        self.preview_btn.setEnabled(True)
        self.progress_bar.setVisible(False)

        QMessageBox.information(self, "Complete", report.summary())

        # Clear state
        self.plan = None
        self.table.setRowCount(0)
        self.status_label.setText("Complete")

    @Slot(str)
    def _on_rename_error(self, error: str):
        """Execution error (e.g. name collision, nothing was renamed)"""
        self.execute_btn.setEnabled(True)
        self.execute_btn.setText("Execute Rename")
        self.preview_btn.setEnabled(True)
        self.progress_bar.setVisible(False)
        QMessageBox.critical(self, "Error", f"Execution failed: {error}")


class MainWindow(QMainWindow):
    """Main window"""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("nflz - Numbered Filenames with Leading Zeroes")
        self.setMinimumSize(800, 600)

        self.pad_widget = PadWidget()
        self.setCentralWidget(self.pad_widget)

        # Status bar
        self.statusBar().showMessage("Ready")
