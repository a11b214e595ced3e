"""Hex color parsing shared by the settings and the canvas."""

from __future__ import annotations

import re
from typing import Tuple

_HEX_PATTERN = re.compile(r"^#?(?P<digits>[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def parse_hex_color(value: str) -> Tuple[int, int, int, int]:
    """Parse ``RRGGBB`` or ``RRGGBBAA`` (optional leading ``#``) into an RGBA tuple.

    Raises:
        ValueError: If the string is not a 6 or 8 digit hex color
    """
    match = _HEX_PATTERN.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        raise ValueError(f"Invalid hex color: {value!r}")
    digits = match.group("digits")
    channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    if len(channels) == 3:
        channels.append(255)
    r, g, b, a = channels
    return r, g, b, a


def to_hex(rgba: Tuple[int, int, int, int]) -> str:
    """Format an RGBA tuple as ``#rrggbb``, adding the alpha byte when not opaque."""
    r, g, b, a = rgba
    if a == 255:
        return f"#{r:02x}{g:02x}{b:02x}"
    return f"#{r:02x}{g:02x}{b:02x}{a:02x}"
