"""Main entry point for the view coordinator demo application."""

import sys
from PySide6.QtWidgets import QApplication

from view_coordinator.coordinators import ApplicationCoordinator
from view_coordinator.core import SharedModel
from view_coordinator.logging_config import setup_logging
from view_coordinator.services import QtUiDispatcher, SettingsManager
from view_coordinator.ui import QtStageWindow
from view_coordinator.ui.demo_views import HomeView, build_demo_registry


def build_coordinator(settings: SettingsManager) -> ApplicationCoordinator:
    """
    Wire the coordinator with its window, loader, dispatcher and model.
    Requires a running QApplication.
    """
    width, height = settings.get_window_size()
    window = QtStageWindow(title="View Coordinator", width=width, height=height)

    return ApplicationCoordinator(
        model=SharedModel({"user": "guest"}),
        loader=build_demo_registry(),
        dispatcher=QtUiDispatcher(),
        window=window,
    )


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("View Coordinator")

    # 2. Configuration and logging
    settings = SettingsManager()
    setup_logging(settings.get_log_level())

    # 3. Instantiate Coordinator and show the first view
    coordinator = build_coordinator(settings)
    coordinator.show(HomeView)

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
