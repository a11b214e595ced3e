"""PySide6 window and entry point for the curve editor."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtWidgets import QApplication, QMainWindow, QWidget

from ..settings import EditorSettings, get_settings
from .canvas.bezier_canvas import BezierCanvas
from .canvas.frame_builder import FrameBuilder
from .controllers import FrameController
from .models import EditorState

logger = logging.getLogger(__name__)


class BezierEditorWindow(QMainWindow):
    """Main window hosting the canvas and its frame loop."""

    def __init__(self, settings: EditorSettings, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.settings = settings
        self.setWindowTitle(settings.window_title)

        self.state = EditorState.for_window(settings.window_width, settings.window_height)
        self.canvas = BezierCanvas(self.state, FrameBuilder(settings), self)
        self.setCentralWidget(self.canvas)

        self.frame_controller = FrameController(
            self.state,
            handle_size=settings.handle_size,
            fps=settings.fps,
            parent=self,
        )
        self.frame_controller.frame_advanced.connect(lambda _index: self.canvas.update())
        self.frame_controller.grab_changed.connect(self._on_grab_changed)

    def showEvent(self, event):  # type: ignore[override]
        self.frame_controller.start()
        super().showEvent(event)

    def closeEvent(self, event):  # type: ignore[override]
        self.frame_controller.stop()
        logger.info("Window closed")
        super().closeEvent(event)

    def _on_grab_changed(self, index: Optional[int]) -> None:
        if index is None:
            self.statusBar().clearMessage()
        else:
            self.statusBar().showMessage(f"Dragging control point {index}")


def run(settings: Optional[EditorSettings] = None) -> int:
    settings = settings or get_settings()
    app = QApplication.instance() or QApplication([])
    app.setStyle("Fusion")

    logger.info(
        "Starting %s (%dx%d @ %d fps, %s sampling)",
        settings.window_title,
        settings.window_width,
        settings.window_height,
        settings.fps,
        settings.sampling,
    )
    window = BezierEditorWindow(settings)
    window.show()
    return app.exec()
