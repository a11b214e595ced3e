"""Pure computational logic for building one frame of draw commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from ...colors import parse_hex_color
from ...core.curve import Point2D, evaluate, tangent_segments
from ...core.sampling import sample_parameters
from ...settings import EditorSettings
from ..models import EditorState

RGBA = Tuple[int, int, int, int]

TITLE_TEXT = "Try moving any red square"
TITLE_POSITION = (10.0, 10.0)
TITLE_FONT_SIZE = 20
DEBUG_TEXT_ORIGIN = (10.0, 32.0)
DEBUG_LINE_SPACING = 15.0
DEBUG_FONT_SIZE = 15


@dataclass(frozen=True)
class RectCommand:
    """Filled axis-aligned rectangle anchored at its top-left corner."""

    x: float
    y: float
    width: float
    height: float
    color: RGBA


@dataclass(frozen=True)
class LineCommand:
    start: Point2D
    end: Point2D
    width: float
    color: RGBA


@dataclass(frozen=True)
class TextCommand:
    text: str
    x: float
    y: float
    font_size: int
    color: RGBA


@dataclass
class FrameCommands:
    """Everything the painter needs for one frame, in draw order.

    Attributes:
        background: Clear color
        lines: Tangent guides
        samples: Curve sample positions, shape (n, 2), drawn as squares of ``sample_size``
        handles: Control-point squares
        texts: Overlay text
    """
    background: RGBA
    lines: List[LineCommand] = field(default_factory=list)
    samples: np.ndarray = field(default_factory=lambda: np.empty((0, 2), dtype=np.float64))
    sample_size: float = 0.0
    sample_color: RGBA = (0, 0, 0, 255)
    handles: List[RectCommand] = field(default_factory=list)
    texts: List[TextCommand] = field(default_factory=list)


class FrameBuilder:
    """Turns editor state into draw commands.

    Holds no Qt objects so the whole frame can be inspected in tests. The
    sampling parameters depend only on settings and are computed once.
    """

    def __init__(self, settings: EditorSettings):
        self.settings = settings
        self._parameters = sample_parameters(
            settings.sampling,
            step=settings.sample_step,
            span=settings.sample_span,
        )
        self._background = parse_hex_color(settings.background_color)
        self._handle_color = parse_hex_color(settings.handle_color)
        self._marker_color = parse_hex_color(settings.marker_color)
        self._curve_color = parse_hex_color(settings.curve_color)
        self._title_color = parse_hex_color(settings.title_color)
        self._debug_color = parse_hex_color(settings.debug_text_color)

    @property
    def parameters(self) -> np.ndarray:
        return self._parameters

    def build(self, state: EditorState) -> FrameCommands:
        points = state.control_points
        settings = self.settings

        lines = [
            LineCommand(start, end, settings.marker_width, self._marker_color)
            for start, end in tangent_segments(points, settings.handle_size)
        ]
        handles = [
            RectCommand(x, y, settings.handle_size, settings.handle_size, self._handle_color)
            for x, y in state.positions()
        ]

        return FrameCommands(
            background=self._background,
            lines=lines,
            samples=evaluate(points, self._parameters),
            sample_size=settings.curve_point_size,
            sample_color=self._curve_color,
            handles=handles,
            texts=self._overlay(state),
        )

    def _overlay(self, state: EditorState) -> List[TextCommand]:
        texts = [TextCommand(TITLE_TEXT, *TITLE_POSITION, TITLE_FONT_SIZE, self._title_color)]
        origin_x, origin_y = DEBUG_TEXT_ORIGIN
        for index, (x, y) in enumerate(state.positions()):
            texts.append(
                TextCommand(
                    f"{index}: ({x:.1f}, {y:.1f})",
                    origin_x,
                    origin_y + DEBUG_LINE_SPACING * index,
                    DEBUG_FONT_SIZE,
                    self._debug_color,
                )
            )
        return texts
