"""
gui_workers.py - GUI Worker Threads

Runs a batch in the background to avoid blocking the UI
"""

from typing import Optional

from PySide6.QtCore import QThread, Signal, QObject

from ..core import run as run_batch, Configuration, ConfigurationError


class BatchWorker(QThread):
    """Batch run worker thread (preview when the configuration is a dry run)"""

    # Signals
    progress = Signal(int, int, str)    # current, total, message
    finished = Signal(object)           # BatchReport
    error = Signal(str)                 # Error message

    def __init__(self, config: Configuration, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.config = config

    def run(self):
        def progress_callback(current: int, total: int, msg: str):
            self.progress.emit(current, total, msg)

        try:
            result = run_batch(self.config, progress_callback=progress_callback)
        except Exception as e:
            self.error.emit(str(e))
            return

        if isinstance(result, ConfigurationError):
            self.error.emit(str(result))
        else:
            self.finished.emit(result)
