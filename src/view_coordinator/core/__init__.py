"""Domain layer - contracts, state and errors shared by every view."""

from .composite_layout import CompositeLayout, LayoutChild
from .errors import NavigationError, UninitializedWindowError, ViewLoadError
from .loaded_view import LoadedView
from .shared_model import SharedModel
from .view_contract import ViewContract, ViewController

__all__ = [
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
