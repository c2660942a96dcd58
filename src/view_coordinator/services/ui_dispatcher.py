"""UI dispatchers - deliver window mutations to the UI-owning thread."""

import logging
import queue
from abc import ABC, abstractmethod
from typing import Callable

from PySide6.QtCore import QObject, Qt, Signal, Slot

logger = logging.getLogger(__name__)

UiTask = Callable[[], None]


class UiDispatcher(ABC):
    """Submits tasks for execution on the UI thread, in submission order."""

    @abstractmethod
    def submit(self, task: UiTask) -> None:
        """Queue ``task``. Never blocks waiting for it to run."""
        pass


class QueuedUiDispatcher(UiDispatcher):
    """
    Cooperative dispatcher drained explicitly by the UI-owning thread.

    Any thread may submit; the owner calls ``run_pending`` from its loop.
    Used for headless runs and tests.
    """

    def __init__(self):
        self._tasks: "queue.SimpleQueue[UiTask]" = queue.SimpleQueue()

    def submit(self, task: UiTask) -> None:
        self._tasks.put(task)

    @property
    def pending(self) -> int:
        return self._tasks.qsize()

    def run_pending(self) -> int:
        """Run every queued task in order and return how many ran.

        A task that raises stops the drain; the remaining tasks stay queued.
        """
        count = 0
        while True:
            try:
                task = self._tasks.get_nowait()
            except queue.Empty:
                return count
            task()
            count += 1


class _TaskRelay(QObject):
    """Lives on the GUI thread and runs tasks delivered through its signal."""

    task_posted = Signal(object)

    def __init__(self):
        super().__init__()
        self.task_posted.connect(self._run, Qt.ConnectionType.QueuedConnection)

    @Slot(object)
    def _run(self, task: UiTask) -> None:
        try:
            task()
        except Exception:
            logger.exception("UI task failed")


class QtUiDispatcher(UiDispatcher):
    """
    Dispatcher backed by the Qt event loop.

    Must be created on the GUI thread. Tasks submitted from any thread are
    posted as queued signal emissions, so Qt runs them on the GUI thread in
    the order they were submitted.
    """

    def __init__(self):
        self._relay = _TaskRelay()

    def submit(self, task: UiTask) -> None:
        self._relay.task_posted.emit(task)
