"""Composite Layout - a view assembled from independently loaded child views."""

from __future__ import annotations

import logging
import threading
from abc import abstractmethod
from typing import TYPE_CHECKING, Any, NamedTuple, Optional, Sequence, Tuple, TypeVar

from view_coordinator.core.errors import ViewLoadError
from view_coordinator.core.view_contract import ViewContract

if TYPE_CHECKING:
    from view_coordinator.coordinators import ApplicationCoordinator
    from view_coordinator.services.view_loader import ViewLoader

T = TypeVar("T")

logger = logging.getLogger(__name__)


class LayoutChild(NamedTuple):
    """A loaded child view: its controller and its display root."""

    controller: ViewContract
    root: Any


class CompositeLayout(ViewContract[T]):
    """Base class for layouts made of a fixed, ordered set of child views.

    Children are loaded lazily the first time a coordinator is assigned and
    never again for the lifetime of the layout instance. Every coordinator
    assignment is fanned out to all children in declaration order.

    Subclasses implement ``child_view_types`` and usually override
    ``on_children_loaded`` to place the child roots inside their own root.
    """

    def __init__(self, loader: ViewLoader):
        if loader is None:
            raise ValueError("ViewLoader must not be None")

        self._loader = loader
        self._children: Optional[Tuple[LayoutChild, ...]] = None
        self._coordinator: Optional[ApplicationCoordinator[T]] = None
        self._load_lock = threading.Lock()

    @abstractmethod
    def child_view_types(self) -> Sequence[type[ViewContract[T]]]:
        """Return the child view classes of this layout, in display order."""

    @property
    def children(self) -> Tuple[LayoutChild, ...]:
        """Loaded children, or an empty tuple before the first load."""
        return self._children or ()

    @property
    def coordinator(self) -> Optional[ApplicationCoordinator[T]]:
        return self._coordinator

    def ensure_children_loaded(self) -> None:
        """Load every declared child once.

        Raises:
            ViewLoadError: If any child fails to load. No child is kept in
                that case, so the next call starts over.
        """
        with self._load_lock:
            if self._children is not None:
                return

            loaded = []
            for child_type in self.child_view_types():
                descriptor = child_type.load_descriptor()
                try:
                    view = self._loader.load(descriptor)
                    if not isinstance(view.controller, child_type):
                        raise TypeError(
                            f"Descriptor {descriptor} produced a "
                            f"{type(view.controller).__name__} controller"
                        )
                except Exception as e:
                    raise ViewLoadError(
                        f"Failed to load layout child {child_type.__name__} "
                        f"of {type(self).__name__}",
                        view_type=child_type,
                        descriptor=descriptor,
                    ) from e
                loaded.append(LayoutChild(view.controller, view.root))

            children = tuple(loaded)
            self.on_children_loaded(children)
            self._children = children

        logger.debug(
            "Loaded %d children for %s", len(children), type(self).__name__
        )

    def set_coordinator(self, coordinator: ApplicationCoordinator[T]) -> None:
        """Load children if needed, then hand the coordinator to each of them."""
        self.ensure_children_loaded()
        self._coordinator = coordinator
        for child in self._children:
            child.controller.set_coordinator(coordinator)

    def on_children_loaded(self, children: Tuple[LayoutChild, ...]) -> None:
        """Hook called once, right after all children loaded successfully."""

    def child(self, view_type: type[ViewContract[T]]) -> ViewContract[T]:
        """Return the loaded child controller of the given type.

        Raises:
            KeyError: If no loaded child is an instance of ``view_type``.
        """
        for child in self.children:
            if isinstance(child.controller, view_type):
                return child.controller
        raise KeyError(view_type.__name__)
