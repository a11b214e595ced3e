"""Frame loop controller driving input handling at the target rate."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal

from ...core.interaction import InteractionController
from ..models import EditorState

logger = logging.getLogger(__name__)


class FrameController(QObject):
    """Runs the per-frame input phase and asks the canvas to repaint.

    Each tick feeds the polled pointer snapshot to the interaction controller,
    then emits ``frame_advanced`` so the view schedules its paint.
    """

    frame_advanced = Signal(int)  # frame index
    grab_changed = Signal(object)  # Optional[int]

    def __init__(
        self,
        state: EditorState,
        handle_size: float,
        fps: int,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._state = state
        self._interaction = InteractionController(state.control_points, handle_size)
        self._frame_interval_ms = max(1, int(round(1000.0 / fps)))
        self._frame_index = 0
        self._timer = QTimer(self)
        self._timer.timeout.connect(self.tick)

    def is_active(self) -> bool:
        return self._timer.isActive()

    def start(self) -> None:
        if self._timer.isActive():
            return
        logger.debug("Frame loop started (%d ms interval)", self._frame_interval_ms)
        self._timer.start(self._frame_interval_ms)

    def stop(self) -> None:
        if not self._timer.isActive():
            return
        self._timer.stop()
        logger.debug("Frame loop stopped after %d frames", self._frame_index)

    def tick(self) -> Optional[int]:
        """Run one input phase and notify listeners."""
        previous = self._interaction.grabbed
        grabbed = self._interaction.update(self._state.pointer)
        if grabbed != previous:
            self.grab_changed.emit(grabbed)
        self.frame_advanced.emit(self._frame_index)
        self._frame_index += 1
        return grabbed
