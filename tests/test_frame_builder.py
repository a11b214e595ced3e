import numpy as np
import pytest

from bezier_editor.core import evaluate, sample_parameters
from bezier_editor.gui.canvas import FrameBuilder, LineCommand, RectCommand
from bezier_editor.gui.models import EditorState
from bezier_editor.settings import EditorSettings


@pytest.fixture
def builder():
    return FrameBuilder(EditorSettings())


@pytest.fixture
def state():
    return EditorState.for_window(1280, 720)


def test_state_rejects_wrong_number_of_points():
    with pytest.raises(ValueError, match="Expected 4 control points"):
        EditorState(control_points=np.zeros((3, 2)))


def test_state_starts_idle_with_default_layout(state):
    assert state.positions() == [(100.0, 360.0), (100.0, 360.0), (1180.0, 360.0), (1180.0, 360.0)]
    assert state.pointer.pressed is False


def test_frame_uses_configured_colors(builder, state):
    frame = builder.build(state)
    assert frame.background == (0, 0, 0, 255)
    assert all(rect.color == (230, 41, 55, 255) for rect in frame.handles)
    assert all(line.color == (0, 121, 241, 255) for line in frame.lines)
    assert frame.sample_color == (0, 228, 48, 255)


def test_frame_has_two_zero_length_guides_at_start(builder, state):
    frame = builder.build(state)
    assert frame.lines == [
        LineCommand((105.0, 365.0), (105.0, 365.0), 2.0, (0, 121, 241, 255)),
        LineCommand((1185.0, 365.0), (1185.0, 365.0), 2.0, (0, 121, 241, 255)),
    ]


def test_frame_samples_follow_oscillating_parameters(builder, state):
    state.control_points[1] = (300.0, 100.0)
    frame = builder.build(state)
    assert frame.samples.shape == (2001, 2)
    assert np.allclose(frame.samples, evaluate(state.control_points, sample_parameters()))
    assert frame.sample_size == 10.0


def test_handles_drawn_at_raw_positions(builder, state):
    state.control_points[2] = (640.0, 100.0)
    frame = builder.build(state)
    assert [(rect.x, rect.y) for rect in frame.handles] == state.positions()
    assert all(rect.width == rect.height == 10.0 for rect in frame.handles)
    assert frame.handles[2] == RectCommand(640.0, 100.0, 10.0, 10.0, (230, 41, 55, 255))


def test_overlay_lists_every_control_point(builder, state):
    frame = builder.build(state)
    texts = frame.texts
    assert texts[0].text == "Try moving any red square"
    assert (texts[0].x, texts[0].y, texts[0].font_size) == (10.0, 10.0, 20)
    assert texts[0].color == (255, 255, 255, 255)
    assert [t.text for t in texts[1:]] == [
        "0: (100.0, 360.0)",
        "1: (100.0, 360.0)",
        "2: (1180.0, 360.0)",
        "3: (1180.0, 360.0)",
    ]
    assert [t.y for t in texts[1:]] == [32.0, 47.0, 62.0, 77.0]
    assert all(t.color == (153, 153, 153, 255) for t in texts[1:])


def test_monotonic_sampling_setting():
    builder = FrameBuilder(EditorSettings(sampling="monotonic"))
    assert builder.parameters[0] == 0.0
    assert builder.parameters[-1] == 1.0
    assert np.all(np.diff(builder.parameters) > 0)
