"""UI layer - PySide6 window and view loading adapters."""

from .qt_ui_loader import QtUiLoader
from .stage_window import QtStageWindow, StageWindow

__all__ = ["QtStageWindow", "StageWindow", "QtUiLoader"]
