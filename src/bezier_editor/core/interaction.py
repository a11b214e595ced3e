"""Drag handling for the control-point handles."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PointerState:
    """Pointer snapshot polled once per frame."""

    x: float
    y: float
    pressed: bool = False


def point_in_handle(point: np.ndarray, x: float, y: float, size: float) -> bool:
    """Return True if ``(x, y)`` lies in the handle's box, bounds inclusive."""
    left = float(point[0])
    top = float(point[1])
    return left <= x <= left + size and top <= y <= top + size


def hit_test(points: np.ndarray, x: float, y: float, size: float) -> Optional[int]:
    """Return the index of the handle under the pointer, or None.

    Every handle is checked and each hit replaces the previous candidate, so
    when handles overlap the highest index wins.
    """
    candidate: Optional[int] = None
    for index, point in enumerate(points):
        if point_in_handle(point, x, y, size):
            candidate = index
    return candidate


class InteractionController:
    """Translates pointer input into control-point moves.

    The controller is the only writer of the control-point array. It runs once
    per frame, before anything reads the points for drawing.

    Attributes:
        points: Control-point array of shape (4, 2), mutated in place
        handle_size: Edge length of a handle's square hit box in pixels
    """

    def __init__(self, points: np.ndarray, handle_size: float = 10.0):
        self.points = points
        self.handle_size = handle_size
        self._grabbed: Optional[int] = None

    @property
    def grabbed(self) -> Optional[int]:
        return self._grabbed

    def is_dragging(self) -> bool:
        return self._grabbed is not None

    def update(self, pointer: PointerState) -> Optional[int]:
        """Advance the drag state machine by one frame.

        Args:
            pointer: Pointer position and primary-button state for this frame

        Returns:
            Index of the grabbed control point after the update, or None
        """
        if pointer.pressed and self._grabbed is None:
            index = hit_test(self.points, pointer.x, pointer.y, self.handle_size)
            if index is not None:
                self._grabbed = index
                logger.debug("Grabbed control point %d at (%.1f, %.1f)", index, pointer.x, pointer.y)

        if not pointer.pressed and self._grabbed is not None:
            logger.debug("Released control point %d", self._grabbed)
            self._grabbed = None

        if self._grabbed is not None:
            half = self.handle_size / 2.0
            self.points[self._grabbed] = (pointer.x - half, pointer.y - half)

        return self._grabbed
