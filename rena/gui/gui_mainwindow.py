"""
gui_mainwindow.py - GUI Main Window

Pick a folder and naming options, preview the batch as a dry run, then
execute it.
"""

import dataclasses
import re
from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QLineEdit, QPushButton, QCheckBox, QComboBox,
    QSpinBox, QTableWidget, QTableWidgetItem, QProgressBar,
    QFileDialog, QMessageBox, QHeaderView, QGroupBox,
)
from PySide6.QtCore import Slot
from PySide6.QtGui import QColor

from ..core import (
    Configuration, BatchReport, OutcomeKind, TargetKind, PaddingDirection, SortKey,
)
from .gui_workers import BatchWorker


_STATUS = {
    OutcomeKind.RENAMED: ("Renamed", QColor(0, 150, 0)),
    OutcomeKind.SKIPPED_DRY_RUN: ("Will Rename", QColor(0, 150, 0)),
    OutcomeKind.SKIPPED_COLLISION: ("Already Exists", QColor(200, 150, 0)),
    OutcomeKind.FAILED: ("Failed", QColor(200, 0, 0)),
}


class RenamePanel(QWidget):
    """Batch options, preview table and execute button"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.report: Optional[BatchReport] = None
        self.preview_config: Optional[Configuration] = None  # Configuration behind self.report
        self.worker: Optional[BatchWorker] = None

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

        dir_layout.addWidget(QLabel("Rename:"), 1, 0)
        self.kind_combo = QComboBox()
        self.kind_combo.addItems(["Files", "Folders"])
        dir_layout.addWidget(self.kind_combo, 1, 1)

        dir_layout.addWidget(QLabel("Match:"), 2, 0)
        self.match_edit = QLineEdit()
        self.match_edit.setPlaceholderText("Regex, leave empty to match all")
        dir_layout.addWidget(self.match_edit, 2, 1, 1, 2)

        layout.addWidget(dir_group)

        # Naming settings group
        name_group = QGroupBox("Naming Settings")
        name_layout = QGridLayout(name_group)

        name_layout.addWidget(QLabel("Prefix:"), 0, 0)
        self.prefix_edit = QLineEdit("item")
        name_layout.addWidget(self.prefix_edit, 0, 1, 1, 2)

        name_layout.addWidget(QLabel("Start Number:"), 1, 0)
        self.start_spin = QSpinBox()
        self.start_spin.setRange(0, 999999999)
        self.start_spin.setValue(0)
        name_layout.addWidget(self.start_spin, 1, 1)

        name_layout.addWidget(QLabel("Padding Digits:"), 2, 0)
        self.padding_spin = QSpinBox()
        self.padding_spin.setRange(0, 64)
        self.padding_spin.setValue(10)
        self.padding_spin.setSpecialValueText("No Padding")
        name_layout.addWidget(self.padding_spin, 2, 1)
        self.direction_combo = QComboBox()
        self.direction_combo.addItems([d.value for d in PaddingDirection])
        name_layout.addWidget(self.direction_combo, 2, 2)

        name_layout.addWidget(QLabel("Sort By:"), 3, 0)
        self.sort_combo = QComboBox()
        self.sort_combo.addItems([k.value for k in SortKey])
        name_layout.addWidget(self.sort_combo, 3, 1)

        name_layout.addWidget(QLabel("Rename Template:"), 4, 0)
        self.template_edit = QLineEdit()
        self.template_edit.setPlaceholderText("e.g. Show S${1} E${2}.mkv (requires Match; replaces numbering)")
        name_layout.addWidget(self.template_edit, 4, 1, 1, 2)

        self.preview_btn = QPushButton("Preview")
        self.preview_btn.clicked.connect(self._do_preview)
        name_layout.addWidget(self.preview_btn, 5, 0, 1, 3)

        layout.addWidget(name_group)

        # Results table
        self.table = QTableWidget()
        self.table.setColumnCount(4)
        self.table.setHorizontalHeaderLabels(["Original Name", "New Name", "Status", "Detail"])
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(2, QHeaderView.ResizeMode.ResizeToContents)
        self.table.horizontalHeader().setSectionResizeMode(3, QHeaderView.ResizeMode.Stretch)
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

    def build_config(self, dry_run: bool) -> Optional[Configuration]:
        """Read the widgets into a Configuration (None after warning the user)"""
        directory = self.dir_edit.text().strip()
        if not directory:
            QMessageBox.warning(self, "Warning", "Please select a directory first")
            return None

        pattern = None
        match_text = self.match_edit.text()
        if match_text:
            try:
                pattern = re.compile(match_text)
            except re.error as e:
                QMessageBox.warning(self, "Warning", f"Invalid regex: {e}")
                return None

        template = self.template_edit.text() or None
        if template is not None and pattern is None:
            QMessageBox.warning(self, "Warning", "A rename template requires a Match regex")
            return None

        return Configuration(
            folder=Path(directory),
            target_kind=TargetKind.DIRECTORY if self.kind_combo.currentIndex() == 1 else TargetKind.FILE,
            origin=self.start_spin.value(),
            prefix=self.prefix_edit.text(),
            padding_width=self.padding_spin.value(),
            padding_direction=PaddingDirection(self.direction_combo.currentText()),
            filter_pattern=pattern,
            rename_template=template,
            dry_run=dry_run,
            verbose=True,
            sort_key=SortKey(self.sort_combo.currentText()),
        )

    def _start(self, config: Configuration):
        self.preview_btn.setEnabled(False)
        self.execute_btn.setEnabled(False)
        self.progress_bar.setVisible(True)
        self.progress_bar.setRange(0, 0)  # Indeterminate until first progress

        self.worker = BatchWorker(config)
        self.worker.progress.connect(self._on_progress)
        self.worker.finished.connect(self._on_finished)
        self.worker.error.connect(self._on_error)
        self.worker.start()

    def _do_preview(self):
        """Generate preview (dry run)"""
        config = self.build_config(dry_run=True)
        if config is not None:
            self.preview_config = config
            self.status_label.setText("Generating preview...")
            self._start(config)

    def _do_execute(self):
        """Execute rename"""
        if not self.report or self.report.dry_run_count == 0:
            return

        reply = QMessageBox.question(
            self, "Confirm",
            f"Are you sure you want to execute {self.report.dry_run_count} rename operations?\n\nThis action cannot be undone!",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        if reply != QMessageBox.StandardButton.Yes:
            return

        config = self.execute_config()
        if config is not None:
            self.status_label.setText("Executing...")
            self._start(config)

    def execute_config(self) -> Optional[Configuration]:
        """The previewed configuration as a live run, ignoring later widget edits"""
        if self.preview_config is None:
            return None
        return dataclasses.replace(self.preview_config, dry_run=False)

    @Slot(int, int, str)
    def _on_progress(self, current: int, total: int, msg: str):
        """Progress update"""
        self.progress_bar.setRange(0, total)
        self.progress_bar.setValue(current)
        self.status_label.setText(msg[-80:] if len(msg) > 80 else msg)

    @Slot(object)
    def _on_finished(self, report: BatchReport):
        """Batch complete"""
        self.report = report
        self.preview_btn.setEnabled(True)
        self.progress_bar.setVisible(False)
        self.show_report(report)

        if report.dry_run_count:
            self.execute_btn.setEnabled(True)
            self.status_label.setText(
                f"Will perform {report.dry_run_count} rename operations "
                f"(already existing: {report.collision_count})"
            )
        elif report.renamed_count or report.failed_count:
            QMessageBox.information(self, "Complete", report.summary())
            self.status_label.setText("Complete")
        else:
            self.status_label.setText("No files need renaming")

    @Slot(str)
    def _on_error(self, error: str):
        """Configuration error"""
        self.report = None
        self.preview_config = None
        self.preview_btn.setEnabled(True)
        self.progress_bar.setVisible(False)
        QMessageBox.critical(self, "Error", error)

    def show_report(self, report: BatchReport):
        """Fill the table with one row per outcome"""
        self.table.setRowCount(len(report.outcomes))
        for i, o in enumerate(report.outcomes):
            label, color = _STATUS[o.kind]
            status_item = QTableWidgetItem(label)
            status_item.setForeground(color)
            self.table.setItem(i, 0, QTableWidgetItem(o.original_path.name))
            self.table.setItem(i, 1, QTableWidgetItem(o.new_path.name))
            self.table.setItem(i, 2, status_item)
            self.table.setItem(i, 3, QTableWidgetItem(o.error))


class MainWindow(QMainWindow):
    """Main window"""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("rena - Batch Rename")
        self.setMinimumSize(800, 600)

        self.panel = RenamePanel()
        self.setCentralWidget(self.panel)

        # Status bar
        self.statusBar().showMessage("Ready")
