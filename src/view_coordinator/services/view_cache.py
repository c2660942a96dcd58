"""View Cache - thread-safe store of loaded views keyed by view class."""

import logging
import threading
from typing import Callable, Dict, List, Optional, Tuple

from view_coordinator.core import LoadedView

logger = logging.getLogger(__name__)


class ViewCache:
    """
    Concurrent mapping from view class to its LoadedView.

    Plain reads and writes go through one lock. ``get_or_load`` additionally
    takes a per-class lock around the load so that concurrent misses for the
    same class build the view only once, while misses for different classes
    still load in parallel.
    """

    def __init__(self):
        self._lock = threading.Lock()
        # Structure: {view_type: LoadedView}
        self._entries: Dict[type, LoadedView] = {}
        self._key_locks: Dict[type, threading.RLock] = {}

    def get(self, view_type: type) -> Optional[LoadedView]:
        """Return the cached entry if it exists."""
        with self._lock:
            return self._entries.get(view_type)

    def put(self, view_type: type, view: LoadedView) -> None:
        """Store or overwrite an entry."""
        with self._lock:
            self._entries[view_type] = view

    def evict(self, view_type: type) -> Optional[LoadedView]:
        """Remove an entry and return it, or None if it was not cached."""
        with self._lock:
            return self._entries.pop(view_type, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def keys(self) -> List[type]:
        with self._lock:
            return list(self._entries.keys())

    def get_or_load(
        self,
        view_type: type,
        load: Callable[[], LoadedView],
        valid: Optional[Callable[[LoadedView], bool]] = None,
    ) -> Tuple[LoadedView, bool]:
        """
        Return the cached entry, loading and storing it on a miss.

        Args:
            view_type: Cache key.
            load: Called at most once per miss, under the key's lock.
            valid: Optional check on a cached entry. An entry it rejects is
                dropped and replaced by a fresh load, under the same lock.

        Returns:
            (entry, loaded) where ``loaded`` is True if ``load`` ran.

        Raises:
            Whatever ``load`` raises; nothing is stored in that case.
        """
        with self._key_lock(view_type):
            cached = self.get(view_type)
            if cached is not None:
                if valid is None or valid(cached):
                    return cached, False
                self.evict(view_type)

            view = load()
            self.put(view_type, view)
            logger.debug("Cached view for %s", view_type.__name__)
            return view, True

    def _key_lock(self, view_type: type) -> threading.RLock:
        with self._lock:
            lock = self._key_locks.get(view_type)
            if lock is None:
                lock = threading.RLock()
                self._key_locks[view_type] = lock
            return lock

    def __contains__(self, view_type: type) -> bool:
        with self._lock:
            return view_type in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
