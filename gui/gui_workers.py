"""
gui_workers.py - GUI Worker Threads

Provides background execution of long tasks to avoid blocking UI
"""

from pathlib import Path
from typing import Optional

from PySide6.QtCore import QThread, Signal, QObject

from core import RenameStyle, RenameOptions, rename_recursive


class RenameWorker(QThread):
    """Style rename worker thread (preview when options.dry_run is set)"""

    # Signals
    progress = Signal(str)          # Progress message
    completed = Signal(object)      # Complete, returns List[PlannedRename]
    error = Signal(str)             # Error message

    def __init__(
        self,
        directory: Path,
        style: RenameStyle,
        options: Optional[RenameOptions] = None,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.directory = directory
        self.style = style
        self.options = options or RenameOptions()

    @property
    def dry_run(self) -> bool:
        return self.options.dry_run

    def run(self):
        try:
            performed = rename_recursive(
                self.directory,
                self.style,
                self.options,
                progress_callback=self.progress.emit,
            )
            self.completed.emit(performed)
        except Exception as e:
            self.error.emit(str(e))
