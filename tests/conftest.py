import os

import numpy as np
import pytest

from bezier_editor import reset_settings_cache
from bezier_editor.core import initial_control_points


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep tests away from any .env file or BEZIER_EDITOR_* variables on the host."""
    for key in list(os.environ):
        if key.upper().startswith("BEZIER_EDITOR_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def default_points():
    return initial_control_points(1280, 720)


@pytest.fixture
def spread_points():
    return np.array([(100.0, 100.0), (300.0, 50.0), (700.0, 400.0), (900.0, 300.0)])


@pytest.fixture(scope="session")
def qt_app():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
