"""
gui - PySide6 Interface for Style Rename Tool

Widgets are imported when the window is launched, so the worker
threads can be used without a display.
"""

import sys


def main() -> int:
    """Launch the main window and run the Qt event loop"""
    from PySide6.QtWidgets import QApplication
    from PySide6.QtCore import Qt

    from .gui_mainwindow import MainWindow

    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Style Rename Tool")
    app.setStyle("Fusion")

    window = MainWindow()
    window.show()

    return app.exec()


__all__ = ["main"]
