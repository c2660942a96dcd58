"""View Loader abstraction - turns a load descriptor into a root and controller."""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict

from view_coordinator.core import LoadedView, ViewContract, ViewLoadError

logger = logging.getLogger(__name__)

ViewFactory = Callable[[], LoadedView]


class ViewLoader(ABC):
    """
    Abstract interface for materializing views.

    Implementations (ViewRegistry, QtUiLoader) decide how a descriptor maps to
    a display tree and a controller. Coordinators and layouts depend on this
    abstraction only.
    """

    @abstractmethod
    def load(self, descriptor: str) -> LoadedView:
        """
        Build a fresh view for a descriptor.

        Args:
            descriptor: Identifier returned by ``ViewContract.load_descriptor``.

        Returns:
            LoadedView with a new root and a new controller.

        Raises:
            ViewLoadError: If the descriptor is unknown or the view cannot be built.
        """
        pass


class ViewRegistry(ViewLoader):
    """Descriptor-keyed factory registry.

    Each factory is called once per load and must return a new LoadedView.
    """

    def __init__(self):
        self._factories: Dict[str, ViewFactory] = {}

    def register(self, descriptor: str, factory: ViewFactory) -> None:
        """Register (or replace) the factory for a descriptor."""
        if not descriptor:
            raise ValueError("Descriptor must not be empty")
        self._factories[descriptor] = factory

    def register_view(self, view_type: type[ViewContract], factory: ViewFactory) -> None:
        """Register a factory under the descriptor declared by ``view_type``."""
        self.register(view_type.load_descriptor(), factory)

    def is_registered(self, descriptor: str) -> bool:
        return descriptor in self._factories

    def load(self, descriptor: str) -> LoadedView:
        factory = self._factories.get(descriptor)
        if factory is None:
            raise ViewLoadError(
                f"No view registered for descriptor: {descriptor}",
                descriptor=descriptor,
            )

        try:
            view = factory()
        except ViewLoadError:
            raise
        except Exception as e:
            raise ViewLoadError(
                f"Failed to build view for descriptor {descriptor}: {e}",
                descriptor=descriptor,
            ) from e

        if not isinstance(view, LoadedView):
            raise ViewLoadError(
                f"Factory for {descriptor} returned {type(view).__name__}, "
                "expected LoadedView",
                descriptor=descriptor,
            )

        logger.debug("Built view for descriptor %s", descriptor)
        return view
