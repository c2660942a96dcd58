"""Shared Model - Thread-safe holder for one application state value."""

import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class SharedModel(Generic[T]):
    """Holds a single value of an application-defined type.

    Reads and writes are serialized by one lock, so no caller can observe a
    half-written value. There is no change notification: views read the
    value when they need it.
    """

    def __init__(self, initial_value: T):
        self._lock = threading.Lock()
        self._value = initial_value

    def get(self) -> T:
        """Return the current value."""
        with self._lock:
            return self._value

    def set(self, value: T) -> None:
        """Replace the current value."""
        with self._lock:
            self._value = value

    def update(self, fn: Callable[[T], T]) -> T:
        """Apply ``fn`` to the current value and store the result atomically.

        Args:
            fn: Receives the current value and returns its replacement.

        Returns:
            The stored replacement value.
        """
        with self._lock:
            self._value = fn(self._value)
            return self._value
