"""Canvas widget that captures pointer input and paints frame commands."""

from __future__ import annotations

from typing import Optional

import pyqtgraph as pg
from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QFont, QPainter
from PySide6.QtWidgets import QWidget

from ...core.interaction import PointerState
from ..models import EditorState
from .frame_builder import FrameBuilder, FrameCommands


class BezierCanvas(QWidget):
    """Fixed-size drawing surface for the curve editor.

    Mouse events only record the pointer snapshot on the shared state; the
    frame controller consumes it on its next tick.
    """

    def __init__(
        self,
        state: EditorState,
        builder: FrameBuilder,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self._state = state
        self._builder = builder
        settings = builder.settings
        self.setFixedSize(settings.window_width, settings.window_height)
        self.setMouseTracking(True)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent)

    # ------------------------------------------------------------------
    # Pointer capture
    # ------------------------------------------------------------------
    def mousePressEvent(self, event):  # type: ignore[override]
        self._record_pointer(event)
        event.accept()

    def mouseMoveEvent(self, event):  # type: ignore[override]
        self._record_pointer(event)
        event.accept()

    def mouseReleaseEvent(self, event):  # type: ignore[override]
        self._record_pointer(event)
        event.accept()

    def _record_pointer(self, event) -> None:
        pos = event.position()
        pressed = bool(event.buttons() & Qt.MouseButton.LeftButton)
        self._state.pointer = PointerState(float(pos.x()), float(pos.y()), pressed)

    # ------------------------------------------------------------------
    # Painting
    # ------------------------------------------------------------------
    def paintEvent(self, event):  # type: ignore[override]
        commands = self._builder.build(self._state)
        painter = QPainter(self)
        try:
            self._paint(painter, commands)
        finally:
            painter.end()

    def _paint(self, painter: QPainter, commands: FrameCommands) -> None:
        painter.fillRect(self.rect(), pg.mkColor(commands.background))
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)

        for line in commands.lines:
            painter.setPen(pg.mkPen(color=line.color, width=line.width))
            painter.drawLine(QPointF(*line.start), QPointF(*line.end))

        painter.setRenderHint(QPainter.RenderHint.Antialiasing, False)
        sample_color = pg.mkColor(commands.sample_color)
        size = commands.sample_size
        for x, y in commands.samples:
            painter.fillRect(QRectF(float(x), float(y), size, size), sample_color)

        for rect in commands.handles:
            painter.fillRect(QRectF(rect.x, rect.y, rect.width, rect.height), pg.mkColor(rect.color))

        font = QFont(painter.font())
        for text in commands.texts:
            font.setPixelSize(text.font_size)
            painter.setFont(font)
            painter.setPen(pg.mkPen(color=text.color))
            bounds = QRectF(text.x, text.y, self.width() - text.x, text.font_size * 2)
            painter.drawText(bounds, Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop, text.text)
