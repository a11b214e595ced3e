import pytest
from pydantic import ValidationError

from bezier_editor.settings import EditorSettings, get_settings, reset_settings_cache


def test_defaults_match_editor_constants():
    settings = EditorSettings()
    assert (settings.window_width, settings.window_height) == (1280, 720)
    assert settings.window_title == "Bezier editor"
    assert settings.fps == 120
    assert settings.handle_size == 10.0
    assert settings.marker_width == 2.0
    assert settings.curve_point_size == 10.0
    assert settings.sample_step == 0.005
    assert settings.sample_span == 10.0
    assert settings.sampling == "oscillating"
    assert settings.debug_text_color == "#999999"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BEZIER_EDITOR_FPS", "60")
    monkeypatch.setenv("BEZIER_EDITOR_SAMPLING", "monotonic")
    settings = EditorSettings()
    assert settings.fps == 60
    assert settings.sampling == "monotonic"


def test_dotenv_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("BEZIER_EDITOR_HANDLE_SIZE=16\n", encoding="utf-8")
    assert EditorSettings().handle_size == 16.0


def test_malformed_color_fails_fast(monkeypatch):
    monkeypatch.setenv("BEZIER_EDITOR_HANDLE_COLOR", "not-a-color")
    with pytest.raises(ValidationError):
        EditorSettings()


@pytest.mark.parametrize("field, value", [("fps", 0), ("window_width", -1), ("sample_step", 0.0)])
def test_non_positive_values_rejected(field, value):
    with pytest.raises(ValidationError):
        EditorSettings(**{field: value})


def test_unknown_sampling_mode_rejected():
    with pytest.raises(ValidationError):
        EditorSettings(sampling="random")


def test_get_settings_caches_until_reset():
    first = get_settings()
    assert get_settings() is first
    reset_settings_cache()
    assert get_settings() is not first


def test_get_settings_overrides_ignore_none():
    base = get_settings()
    assert get_settings(fps=None, sampling=None) is base
    overridden = get_settings(fps=30)
    assert overridden.fps == 30
    assert overridden.sampling == "oscillating"
