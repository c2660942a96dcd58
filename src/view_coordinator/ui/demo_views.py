"""Demo screens - a home page, a settings page and a three-part dashboard."""

from typing import Any, Dict, Tuple

from PySide6.QtWidgets import (
    QGridLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from view_coordinator.core import CompositeLayout, LayoutChild, LoadedView, ViewController
from view_coordinator.services import ViewLoader, ViewRegistry

Session = Dict[str, Any]


class HomeView(ViewController[Session]):
    """Landing screen with navigation buttons."""

    def __init__(self):
        self.root = QWidget()
        layout = QVBoxLayout(self.root)

        self.greeting = QLabel("Welcome")
        layout.addWidget(self.greeting)

        self.settings_button = QPushButton("Settings")
        self.settings_button.clicked.connect(self.open_settings)
        layout.addWidget(self.settings_button)

        self.dashboard_button = QPushButton("Dashboard")
        self.dashboard_button.clicked.connect(self.open_dashboard)
        layout.addWidget(self.dashboard_button)
        layout.addStretch()

    @classmethod
    def load_descriptor(cls) -> str:
        return "demo/home"

    def set_coordinator(self, coordinator) -> None:
        super().set_coordinator(coordinator)
        user = self.model.get().get("user", "guest")
        self.greeting.setText(f"Welcome, {user}")

    def open_settings(self):
        self.coordinator.show(SettingsView)

    def open_dashboard(self):
        self.coordinator.show(DashboardLayout)


class SettingsView(ViewController[Session]):
    """Edits the user name stored in the shared session."""

    def __init__(self):
        self.root = QWidget()
        layout = QVBoxLayout(self.root)

        layout.addWidget(QLabel("User name"))
        self.user_edit = QLineEdit()
        layout.addWidget(self.user_edit)

        self.save_button = QPushButton("Save")
        self.save_button.clicked.connect(self.save)
        layout.addWidget(self.save_button)
        layout.addStretch()

    @classmethod
    def load_descriptor(cls) -> str:
        return "demo/settings"

    def set_coordinator(self, coordinator) -> None:
        super().set_coordinator(coordinator)
        self.user_edit.setText(self.model.get().get("user", ""))

    def save(self):
        user = self.user_edit.text().strip() or "guest"
        self.model.update(lambda session: {**session, "user": user})
        self.coordinator.show(HomeView)


class HeaderView(ViewController[Session]):
    def __init__(self):
        self.root = QLabel("Dashboard")

    @classmethod
    def load_descriptor(cls) -> str:
        return "demo/dashboard/header"


class SidebarView(ViewController[Session]):
    def __init__(self):
        self.root = QWidget()
        layout = QVBoxLayout(self.root)
        self.home_button = QPushButton("Home")
        self.home_button.clicked.connect(lambda: self.coordinator.show(HomeView))
        layout.addWidget(self.home_button)
        layout.addStretch()

    @classmethod
    def load_descriptor(cls) -> str:
        return "demo/dashboard/sidebar"


class ContentView(ViewController[Session]):
    def __init__(self):
        self.root = QLabel()

    @classmethod
    def load_descriptor(cls) -> str:
        return "demo/dashboard/content"

    def set_coordinator(self, coordinator) -> None:
        super().set_coordinator(coordinator)
        visits = self.model.update(
            lambda session: {**session, "dashboard_visits": session.get("dashboard_visits", 0) + 1}
        )["dashboard_visits"]
        self.root.setText(f"Dashboard visits: {visits}")


class DashboardLayout(CompositeLayout[Session]):
    """Header across the top, sidebar on the left, content on the right."""

    def __init__(self, loader: ViewLoader):
        super().__init__(loader)
        self.root = QWidget()
        self._grid = QGridLayout(self.root)

    @classmethod
    def load_descriptor(cls) -> str:
        return "demo/dashboard"

    def child_view_types(self):
        return [HeaderView, SidebarView, ContentView]

    def on_children_loaded(self, children: Tuple[LayoutChild, ...]) -> None:
        header, sidebar, content = children
        self._grid.addWidget(header.root, 0, 0, 1, 2)
        self._grid.addWidget(sidebar.root, 1, 0)
        self._grid.addWidget(content.root, 1, 1)
        self._grid.setColumnStretch(1, 1)


def _leaf(view_type: type[ViewController]):
    def factory() -> LoadedView:
        controller = view_type()
        return LoadedView(root=controller.root, controller=controller)
    return factory


def build_demo_registry() -> ViewRegistry:
    """Register every demo screen in a new ViewRegistry."""
    registry = ViewRegistry()
    for view_type in (HomeView, SettingsView, HeaderView, SidebarView, ContentView):
        registry.register_view(view_type, _leaf(view_type))

    def dashboard() -> LoadedView:
        layout = DashboardLayout(registry)
        return LoadedView(root=layout.root, controller=layout)

    registry.register_view(DashboardLayout, dashboard)
    return registry
