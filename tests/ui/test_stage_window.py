#!/usr/bin/env python3
"""
Tests for QtStageWindow - validates root swapping and geometry handling.
"""

from PySide6.QtWidgets import QApplication, QLabel

from view_coordinator.ui import QtStageWindow


def ensure_qt_app():
    if QApplication.instance() is None:
        QApplication([])


def test_stage_window_initial_geometry_and_title():
    ensure_qt_app()

    window = QtStageWindow(title="Demo", width=640, height=480)

    assert window.windowTitle() == "Demo"
    assert (window.width(), window.height()) == (640, 480)


def test_set_root_switches_current_widget_and_keeps_previous_roots():
    ensure_qt_app()

    window = QtStageWindow()
    first, second = QLabel("first"), QLabel("second")

    window.set_root(first)
    window.set_root(second)
    assert window.current_root() is second

    window.set_root(first)
    assert window.current_root() is first
    # The second root is still alive and parented to the window
    assert second.text() == "second"
    assert window._stack.count() == 2


def test_set_width_and_height_resize_one_dimension():
    ensure_qt_app()

    window = QtStageWindow(width=640, height=480)
    window.set_width(700)
    assert (window.width(), window.height()) == (700, 480)

    window.set_height(500)
    assert (window.width(), window.height()) == (700, 500)


def test_set_resizable_toggles_size_constraints():
    ensure_qt_app()

    window = QtStageWindow(width=640, height=480)

    window.set_resizable(False)
    assert window.minimumSize() == window.maximumSize()

    window.set_resizable(True)
    assert window.minimumWidth() == 0
    assert window.maximumWidth() > 640
