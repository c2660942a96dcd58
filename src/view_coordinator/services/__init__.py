"""Services layer - view loading, caching, UI dispatching and settings."""

from view_coordinator.services.settings_manager import SettingsManager
from view_coordinator.services.ui_dispatcher import QtUiDispatcher, QueuedUiDispatcher, UiDispatcher
from view_coordinator.services.view_cache import ViewCache
from view_coordinator.services.view_loader import ViewFactory, ViewLoader, ViewRegistry

__all__ = [
	"ViewLoader",
	"ViewRegistry",
	"ViewFactory",
	"ViewCache",
	"UiDispatcher",
	"QueuedUiDispatcher",
	"QtUiDispatcher",
	"SettingsManager",
]
