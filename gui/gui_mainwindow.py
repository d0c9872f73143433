"""
gui_mainwindow.py - GUI Main Window

Single panel: pick a root directory and a naming style, preview the
renames, then execute them.
"""

from dataclasses import replace
from pathlib import Path
from typing import Optional, List

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QLineEdit, QPushButton, QCheckBox, QComboBox,
    QTableWidget, QTableWidgetItem, QProgressBar,
    QFileDialog, QMessageBox, QHeaderView, QGroupBox
)
from PySide6.QtCore import Slot
from PySide6.QtGui import QColor

from core import RenameStyle, RenameOptions, PlannedRename, display_path
from .gui_workers import RenameWorker


class StyleRenamePanel(QWidget):
    """Style rename panel"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.planned: List[PlannedRename] = []
        self.preview_worker: Optional[RenameWorker] = None
        self.rename_worker: Optional[RenameWorker] = None

        self._init_ui()

    def _init_ui(self):
        layout = QVBoxLayout(self)

        # Settings group
        settings_group = QGroupBox("Rename Settings")
        settings_layout = QGridLayout(settings_group)

        # Directory selection
        settings_layout.addWidget(QLabel("Directory:"), 0, 0)
        self.dir_edit = QLineEdit()
        self.dir_edit.setPlaceholderText("Select root directory...")
        self.dir_edit.textChanged.connect(self._on_settings_changed)
        settings_layout.addWidget(self.dir_edit, 0, 1)
        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.clicked.connect(self._browse_directory)
        settings_layout.addWidget(self.browse_btn, 0, 2)

        # Naming style
        settings_layout.addWidget(QLabel("Style:"), 1, 0)
        self.style_combo = QComboBox()
        for style in RenameStyle:
            example = style.join(["my", "file", "name"])
            self.style_combo.addItem(f"{style.value}  ({example})", style)
        self.style_combo.currentIndexChanged.connect(self._on_settings_changed)
        settings_layout.addWidget(self.style_combo, 1, 1, 1, 2)

        # Ignored directories
        settings_layout.addWidget(QLabel("Ignore:"), 2, 0)
        self.ignore_edit = QLineEdit()
        self.ignore_edit.setPlaceholderText("Directory names to leave untouched, comma separated (e.g. .git, node_modules)")
        self.ignore_edit.textChanged.connect(self._on_settings_changed)
        settings_layout.addWidget(self.ignore_edit, 2, 1, 1, 2)

        # Options
        options_layout = QHBoxLayout()
        self.hidden_check = QCheckBox("Skip Hidden Files")
        self.hidden_check.toggled.connect(self._on_settings_changed)
        options_layout.addWidget(self.hidden_check)
        options_layout.addStretch()
        settings_layout.addLayout(options_layout, 3, 0, 1, 3)

        # Preview button
        self.preview_btn = QPushButton("Preview")
        self.preview_btn.clicked.connect(self._do_preview)
        settings_layout.addWidget(self.preview_btn, 4, 0, 1, 3)

        layout.addWidget(settings_group)

        # Results table
        self.table = QTableWidget()
        self.table.setColumnCount(3)
        self.table.setHorizontalHeaderLabels(["Original Path", "New Name", "Status"])
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(2, QHeaderView.ResizeMode.ResizeToContents)
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

    def _selected_directory(self) -> Optional[Path]:
        directory = self.dir_edit.text().strip()
        if not directory:
            QMessageBox.warning(self, "Warning", "Please select a directory first")
            return None

        path = Path(directory)
        if not path.is_dir():
            QMessageBox.warning(self, "Warning", f"Directory does not exist: {directory}")
            return None
        return path

    def _options(self, dry_run: bool) -> RenameOptions:
        ignore = [d.strip() for d in self.ignore_edit.text().split(",") if d.strip()]
        return RenameOptions(
            dry_run=dry_run,
            include_hidden=not self.hidden_check.isChecked(),
            ignore_dirs=ignore,
        )

    def _set_busy(self, busy: bool):
        # Settings stay fixed while a worker runs with them
        for widget in (self.dir_edit, self.browse_btn, self.style_combo,
                       self.ignore_edit, self.hidden_check, self.preview_btn):
            widget.setEnabled(not busy)
        self.progress_bar.setVisible(busy)
        if busy:
            self.execute_btn.setEnabled(False)
            self.progress_bar.setRange(0, 0)  # Indeterminate progress

    def _matches_settings(self, worker: Optional[RenameWorker]) -> bool:
        """Whether worker ran with the settings the fields show now"""
        if worker is None:
            return False
        return (
            worker.directory == Path(self.dir_edit.text().strip())
            and worker.style == self.style_combo.currentData()
            and worker.options == self._options(worker.dry_run)
        )

    def _on_settings_changed(self, *args):
        """A stale preview must not be executed"""
        self.planned = []
        self.execute_btn.setEnabled(False)

    def _do_preview(self):
        """Generate preview"""
        path = self._selected_directory()
        if path is None:
            return

        self._set_busy(True)
        self.preview_btn.setText("Generating...")

        self.preview_worker = RenameWorker(path, self.style_combo.currentData(), self._options(dry_run=True))
        self.preview_worker.progress.connect(self._on_progress)
        self.preview_worker.completed.connect(self._on_preview_finished)
        self.preview_worker.error.connect(self._on_error)
        self.preview_worker.start()

    @Slot(str)
    def _on_progress(self, msg: str):
        """Progress update"""
        self.status_label.setText(msg[-80:] if len(msg) > 80 else msg)

    @Slot(object)
    def _on_preview_finished(self, planned: List[PlannedRename]):
        """Preview complete"""
        self._set_busy(False)
        self.preview_btn.setText("Preview")

        if not self._matches_settings(self.preview_worker):
            self.planned = []
            self.table.setRowCount(0)
            self.status_label.setText("Settings changed, run Preview again")
            return
        self.planned = planned

        self._update_table(planned, "Will Rename", QColor(0, 150, 0))

        if planned:
            self.execute_btn.setEnabled(True)
            self.status_label.setText(f"Will perform {len(planned)} rename operations")
        else:
            self.status_label.setText("No files need renaming")

    def _update_table(self, renames: List[PlannedRename], status: str, color: QColor):
        """Update table to display renames"""
        base_dir = Path(self.dir_edit.text().strip())
        self.table.setRowCount(len(renames))
        for i, op in enumerate(renames):
            try:
                src = display_path(op.src.relative_to(base_dir))
            except ValueError:
                src = display_path(op.src)
            self.table.setItem(i, 0, QTableWidgetItem(src))
            self.table.setItem(i, 1, QTableWidgetItem(display_path(op.dst.name)))
            status_item = QTableWidgetItem(status)
            status_item.setForeground(color)
            self.table.setItem(i, 2, status_item)

    def _do_execute(self):
        """Execute rename"""
        if not self.planned or not self._matches_settings(self.preview_worker):
            return
        preview = self.preview_worker

        # Confirm
        reply = QMessageBox.question(
            self, "Confirm",
            f"Are you sure you want to execute {len(self.planned)} rename operations?\n\nThis action cannot be undone!",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        if reply != QMessageBox.StandardButton.Yes:
            return

        self._set_busy(True)
        self.execute_btn.setText("Executing...")

        self.rename_worker = RenameWorker(preview.directory, preview.style, replace(preview.options, dry_run=False))
        self.rename_worker.progress.connect(self._on_progress)
        self.rename_worker.completed.connect(self._on_rename_finished)
        self.rename_worker.error.connect(self._on_error)
        self.rename_worker.start()

    @Slot(object)
    def _on_rename_finished(self, performed: List[PlannedRename]):
        """Execution complete"""
        self._set_busy(False)
        self.execute_btn.setText("Execute Rename")
        self.planned = []

        self._update_table(performed, "Renamed", QColor(0, 100, 200))
        QMessageBox.information(self, "Complete", f"Rename complete!\n\nRenamed: {len(performed)}")
        self.status_label.setText("Complete")

    @Slot(str)
    def _on_error(self, error: str):
        """Preview or execution error"""
        self._set_busy(False)
        self.preview_btn.setText("Preview")
        self.execute_btn.setText("Execute Rename")
        QMessageBox.critical(
            self, "Error",
            f"Rename stopped: {error}\n\nRenames done before the error are kept. Run Preview again."
        )


class MainWindow(QMainWindow):
    """Main window"""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Style Rename Tool")
        self.setMinimumSize(800, 600)

        # Create central widget
        central = QWidget()
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)

        self.panel = StyleRenamePanel()
        layout.addWidget(self.panel)

        # Status bar
        self.statusBar().showMessage("Ready")
