"""Application settings loaded from the environment or .env via Pydantic."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .colors import parse_hex_color, to_hex
from .core.sampling import DEFAULT_SPAN, DEFAULT_STEP, SamplingMode


logger = logging.getLogger(__name__)


class EditorSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BEZIER_EDITOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    window_title: str = Field(default="Bezier editor")
    window_width: int = Field(default=1280, gt=0)
    window_height: int = Field(default=720, gt=0)
    fps: int = Field(default=120, gt=0, description="Target frames per second")

    handle_size: float = Field(default=10.0, gt=0)
    marker_width: float = Field(default=2.0, gt=0, description="Tangent guide line width")
    curve_point_size: float = Field(default=10.0, gt=0)
    sample_step: float = Field(default=DEFAULT_STEP, gt=0)
    sample_span: float = Field(default=DEFAULT_SPAN, ge=0)
    sampling: SamplingMode = Field(default="oscillating")

    background_color: str = Field(default="#000000")
    handle_color: str = Field(default="#e62937")
    marker_color: str = Field(default="#0079f1")
    curve_color: str = Field(default="#00e430")
    title_color: str = Field(default="#ffffff")
    debug_text_color: str = Field(default="999999")

    @field_validator(
        "background_color",
        "handle_color",
        "marker_color",
        "curve_color",
        "title_color",
        "debug_text_color",
    )
    @classmethod
    def _normalize_color(cls, value: str) -> str:
        return to_hex(parse_hex_color(value))


_settings: Optional[EditorSettings] = None


def get_settings(**overrides: Any) -> EditorSettings:
    """Return the process-wide settings, building them on first use.

    Keyword overrides take priority over the environment and force a rebuild;
    overrides set to None are ignored.
    """
    global _settings
    values: Dict[str, Any] = {key: value for key, value in overrides.items() if value is not None}
    if _settings is None or values:
        _settings = EditorSettings(**values)
        logger.debug("Loaded settings: %s", _settings.model_dump())
    return _settings


def reset_settings_cache() -> None:
    global _settings
    _settings = None
