"""
View Coordinator - navigation layer for PySide6 desktop applications.

This package provides:
- A coordinator that shows views by class and caches them per class
- Composite layouts assembled from independently loaded child views
- A thread-safe shared model for application state
"""

__version__ = "0.1.0"

# Make key components available at package level
from view_coordinator.core import (
    CompositeLayout,
    LayoutChild,
    LoadedView,
    NavigationError,
    SharedModel,
    UninitializedWindowError,
    ViewContract,
    ViewController,
    ViewLoadError,
)
from view_coordinator.coordinators import ApplicationCoordinator

__all__ = [
    "ApplicationCoordinator",
    "SharedModel",
    "ViewContract",
    "ViewController",
    "CompositeLayout",
    "LayoutChild",
    "LoadedView",
    "NavigationError",
    "UninitializedWindowError",
    "ViewLoadError",
]
