"""PySide6 GUI for interactive curve editing.

Import :func:`bezier_editor.gui.app.run` directly; this package does not pull
in Qt on import.
"""
