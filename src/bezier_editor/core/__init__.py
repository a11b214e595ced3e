"""Curve model and interaction logic, free of any GUI dependency."""

from .curve import (
    CONTROL_POINT_COUNT,
    Point2D,
    Segment,
    evaluate,
    handle_center,
    initial_control_points,
    lerp,
    tangent_segments,
)
from .interaction import InteractionController, PointerState, hit_test, point_in_handle
from .sampling import DEFAULT_SPAN, DEFAULT_STEP, SamplingMode, sample_count, sample_parameters

__all__ = [
    "CONTROL_POINT_COUNT",
    "Point2D",
    "Segment",
    "evaluate",
    "handle_center",
    "initial_control_points",
    "lerp",
    "tangent_segments",
    "InteractionController",
    "PointerState",
    "hit_test",
    "point_in_handle",
    "DEFAULT_SPAN",
    "DEFAULT_STEP",
    "SamplingMode",
    "sample_count",
    "sample_parameters",
]
