"""Coordinators - Orchestration layer owning the window and view navigation."""

from .application_coordinator import ApplicationCoordinator

__all__ = [
    "ApplicationCoordinator",
]
