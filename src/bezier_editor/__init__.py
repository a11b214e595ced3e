"""
Interactive editor for a single cubic Bezier curve.

The package is split into a GUI-free core (curve evaluation, sampling and the
drag state machine) and a PySide6 front end that polls pointer input, runs the
core once per frame and paints the result.
"""

from .core import (
    InteractionController,
    PointerState,
    evaluate,
    hit_test,
    initial_control_points,
    lerp,
    sample_parameters,
    tangent_segments,
)
from .settings import EditorSettings, get_settings, reset_settings_cache

__all__ = [
    "InteractionController",
    "PointerState",
    "evaluate",
    "hit_test",
    "initial_control_points",
    "lerp",
    "sample_parameters",
    "tangent_segments",
    "EditorSettings",
    "get_settings",
    "reset_settings_cache",
]
