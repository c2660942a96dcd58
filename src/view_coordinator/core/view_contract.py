"""View contracts - the interface every navigable view must satisfy."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, Optional, TypeVar

if TYPE_CHECKING:
    from view_coordinator.coordinators import ApplicationCoordinator
    from view_coordinator.core.shared_model import SharedModel

T = TypeVar("T")


class ViewContract(ABC, Generic[T]):
    """Capability interface for anything the coordinator can show.

    Separates screen logic from application flow: a view only learns about
    the coordinator through ``set_coordinator`` and only tells the outside
    world how to load it through ``load_descriptor``.
    """

    @abstractmethod
    def set_coordinator(self, coordinator: ApplicationCoordinator[T]) -> None:
        """Store or propagate the coordinator. Called again on every show."""

    @classmethod
    @abstractmethod
    def load_descriptor(cls) -> str:
        """Return the identifier the view loader uses to build this view."""


class ViewController(ViewContract[T]):
    """Base class for leaf views.

    Keeps the coordinator handed over by the framework; subclasses only
    declare their load descriptor.
    """

    _coordinator: Optional[ApplicationCoordinator[T]] = None

    @property
    def coordinator(self) -> Optional[ApplicationCoordinator[T]]:
        return self._coordinator

    @property
    def model(self) -> SharedModel[T]:
        """The shared model of the bound coordinator.

        Raises:
            RuntimeError: If no coordinator has been set yet.
        """
        if self._coordinator is None:
            raise RuntimeError(
                f"{type(self).__name__} is not bound to a coordinator"
            )
        return self._coordinator.model

    def set_coordinator(self, coordinator: ApplicationCoordinator[T]) -> None:
        self._coordinator = coordinator
