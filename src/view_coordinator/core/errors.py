"""Navigation errors raised by the coordinator and its collaborators."""

from typing import Optional


class NavigationError(Exception):
    """Base class for every error raised by view_coordinator."""


class UninitializedWindowError(NavigationError, RuntimeError):
    """Raised when a view is shown before a window has been assigned."""


class ViewLoadError(NavigationError):
    """A view or layout child could not be resolved or instantiated.

    Attributes:
        view_type: The view class that failed to load, when known.
        descriptor: The load descriptor handed to the loader, when known.
    """

    def __init__(
        self,
        message: str,
        view_type: Optional[type] = None,
        descriptor: Optional[str] = None,
    ):
        super().__init__(message)
        self.view_type = view_type
        self.descriptor = descriptor
