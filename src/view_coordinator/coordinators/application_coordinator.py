"""Application Coordinator - Owns the window and switches between views."""

import logging
from typing import Generic, List, Optional, TypeVar

from view_coordinator.core import (
    LoadedView,
    SharedModel,
    UninitializedWindowError,
    ViewContract,
    ViewLoadError,
)
from view_coordinator.services import UiDispatcher, ViewCache, ViewLoader
from view_coordinator.ui.stage_window import StageWindow

T = TypeVar("T")
V = TypeVar("V", bound=ViewContract)

logger = logging.getLogger(__name__)


class ApplicationCoordinator(Generic[T]):
    """Shows views in the application window and caches them per view class.

    Responsibilities:
    - Load each view class once and reuse the root and controller afterwards
    - Hand itself to every controller it shows, on every show
    - Swap the window root on the UI thread, keeping the window size
    - Expose the shared model to the views it manages

    Each view class has at most one live instance. ``show`` may be called from
    any thread; the window only changes once the dispatcher runs the update.
    """

    def __init__(
        self,
        model: SharedModel[T],
        loader: ViewLoader,
        dispatcher: UiDispatcher,
        window: Optional[StageWindow] = None,
    ):
        if model is None:
            raise ValueError("SharedModel must not be None")
        if loader is None:
            raise ValueError("ViewLoader must not be None")
        if dispatcher is None:
            raise ValueError("UiDispatcher must not be None")

        self.model = model
        self.loader = loader
        self._dispatcher = dispatcher
        self._window = window
        self._cache = ViewCache()

    @property
    def window(self) -> Optional[StageWindow]:
        return self._window

    @window.setter
    def window(self, window: StageWindow) -> None:
        self._window = window

    def show(self, view_type: type[V]) -> V:
        """Display a view in the window, loading it on first use.

        Args:
            view_type: The view class to show.

        Returns:
            The controller of the shown view. Repeated calls for the same
            class return the same instance.

        Raises:
            UninitializedWindowError: If no window has been assigned yet.
            ViewLoadError: If the view could not be loaded. Nothing is cached
                and a later call loads again.
        """
        window = self._window
        if window is None:
            logger.error(
                "Window is not initialized. Cannot show view: %s", view_type.__name__
            )
            raise UninitializedWindowError(
                f"Window is not initialized. Cannot show view: {view_type.__name__}"
            )

        width = window.width()
        height = window.height()

        def is_current(entry: LoadedView) -> bool:
            if isinstance(entry.controller, view_type):
                return True
            logger.warning(
                "Cached controller for %s is a %s; reloading",
                view_type.__name__,
                type(entry.controller).__name__,
            )
            return False

        view, loaded = self._cache.get_or_load(
            view_type, lambda: self._load_view(view_type), valid=is_current
        )

        if loaded:
            logger.info("Loaded and displayed view: %s", view_type.__name__)
        else:
            view.controller.set_coordinator(self)
            logger.info("Reusing cached view for %s", view_type.__name__)

        self._dispatcher.submit(
            lambda: self._present(window, view.root, width, height)
        )
        return view.controller

    def is_cached(self, view_type: type[ViewContract]) -> bool:
        return view_type in self._cache

    def cached_view_types(self) -> List[type[ViewContract]]:
        return self._cache.keys()

    def evict(self, view_type: type[ViewContract]) -> bool:
        """Drop a cached view so the next show loads it again.

        Returns:
            True if an entry was removed.
        """
        removed = self._cache.evict(view_type) is not None
        if removed:
            logger.info("Evicted cached view for %s", view_type.__name__)
        return removed

    def clear_cache(self) -> None:
        """Drop every cached view."""
        self._cache.clear()
        logger.info("View cache cleared")

    def _load_view(self, view_type: type[V]) -> LoadedView:
        descriptor = None
        try:
            descriptor = view_type.load_descriptor()
            view = self.loader.load(descriptor)
            if not isinstance(view.controller, view_type):
                raise TypeError(
                    f"Descriptor {descriptor} produced a "
                    f"{type(view.controller).__name__} controller"
                )
            view.controller.set_coordinator(self)
        except Exception as e:
            raise ViewLoadError(
                f"Failed to load view: {view_type.__name__}",
                view_type=view_type,
                descriptor=descriptor,
            ) from e
        return view

    @staticmethod
    def _present(window: StageWindow, root, width: int, height: int) -> None:
        window.set_root(root)
        window.set_resizable(True)
        window.show()
        # Restore the previous window size
        window.set_width(width)
        window.set_height(height)
