"""Parameter sequences used to sample the curve once per frame."""

from __future__ import annotations

import math
from typing import Literal

import numpy as np

SamplingMode = Literal["oscillating", "monotonic"]

DEFAULT_STEP = 0.005
DEFAULT_SPAN = 10.0


def sample_count(step: float = DEFAULT_STEP, span: float = DEFAULT_SPAN) -> int:
    """Number of steps in ``[0, span]`` inclusive at the given increment."""
    if step <= 0:
        raise ValueError("Sample step must be positive")
    if span < 0:
        raise ValueError("Sample span must be non-negative")
    # Tolerance absorbs float error in span / step without stepping past span.
    return int(math.floor(span / step + 1e-9)) + 1


def sample_parameters(
    mode: SamplingMode = "oscillating",
    step: float = DEFAULT_STEP,
    span: float = DEFAULT_SPAN,
) -> np.ndarray:
    """
    Build the curve parameters for one frame.

    ``"oscillating"`` maps every step ``s`` in ``[0, span]`` to
    ``(sin(s) + 1) / 2``, so the curve is traced back and forth several times.
    ``"monotonic"`` sweeps ``[0, 1]`` once with the same number of samples.
    """
    count = sample_count(step, span)
    if mode == "oscillating":
        steps = np.arange(count, dtype=np.float64) * step
        return (np.sin(steps) + 1.0) / 2.0
    if mode == "monotonic":
        return np.linspace(0.0, 1.0, num=count, endpoint=True)
    raise ValueError(f"Unsupported sampling mode: '{mode}'. Available modes: ['oscillating', 'monotonic']")
