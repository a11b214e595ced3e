"""Controller layer for GUI business logic."""

from .frame_controller import FrameController

__all__ = ["FrameController"]
