"""Canvas components for curve drawing and editing.

The Qt widget lives in :mod:`.bezier_canvas` and is imported directly by the
window so the frame builder stays importable without a GUI stack.
"""

from .frame_builder import FrameBuilder, FrameCommands, LineCommand, RectCommand, TextCommand

__all__ = [
    "FrameBuilder",
    "FrameCommands",
    "LineCommand",
    "RectCommand",
    "TextCommand",
]
