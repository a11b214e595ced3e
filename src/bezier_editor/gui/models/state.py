"""Editor state data model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import numpy as np

from ...core.curve import CONTROL_POINT_COUNT, Point2D, initial_control_points
from ...core.interaction import PointerState


@dataclass
class EditorState:
    """Mutable state shared by the phases of a frame.

    Attributes:
        control_points: Handle positions (top-left corners), shape (4, 2)
        pointer: Latest pointer snapshot captured from the window
    """
    control_points: np.ndarray
    pointer: PointerState = field(default_factory=lambda: PointerState(0.0, 0.0, False))

    def __post_init__(self) -> None:
        points = np.asarray(self.control_points, dtype=np.float64)
        if points.shape != (CONTROL_POINT_COUNT, 2):
            raise ValueError(
                f"Expected {CONTROL_POINT_COUNT} control points of shape (x, y), got array of shape {points.shape}"
            )
        self.control_points = points

    @classmethod
    def for_window(cls, width: float, height: float) -> "EditorState":
        """Create the startup layout for a window of the given size."""
        return cls(control_points=initial_control_points(width, height))

    def positions(self) -> List[Point2D]:
        return [(float(x), float(y)) for x, y in self.control_points]
