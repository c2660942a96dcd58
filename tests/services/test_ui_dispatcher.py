"""Unit tests for the UI dispatchers."""

import threading

import pytest
from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from view_coordinator.services import QtUiDispatcher, QueuedUiDispatcher


def ensure_qt_app():
    if QApplication.instance() is None:
        QApplication([])


class TestQueuedUiDispatcher:
    """Tests for the cooperative dispatcher."""

    def test_submit_does_not_run_task(self):
        dispatcher = QueuedUiDispatcher()
        ran = []

        dispatcher.submit(lambda: ran.append(1))

        assert ran == []
        assert dispatcher.pending == 1

    def test_run_pending_runs_in_submission_order(self):
        dispatcher = QueuedUiDispatcher()
        ran = []
        for i in range(5):
            dispatcher.submit(lambda i=i: ran.append(i))

        assert dispatcher.run_pending() == 5
        assert ran == [0, 1, 2, 3, 4]
        assert dispatcher.pending == 0

    def test_tasks_from_worker_threads_run_on_draining_thread(self):
        dispatcher = QueuedUiDispatcher()
        ran_on = []

        def worker():
            dispatcher.submit(lambda: ran_on.append(threading.get_ident()))

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        dispatcher.run_pending()

        assert ran_on == [threading.get_ident()] * 4

    def test_failing_task_propagates_and_keeps_remaining_tasks(self):
        dispatcher = QueuedUiDispatcher()
        ran = []

        def broken():
            raise RuntimeError("task failed")

        dispatcher.submit(broken)
        dispatcher.submit(lambda: ran.append("after"))

        with pytest.raises(RuntimeError, match="task failed"):
            dispatcher.run_pending()

        assert dispatcher.pending == 1
        dispatcher.run_pending()
        assert ran == ["after"]


class TestQtUiDispatcher:
    """Tests for the Qt event loop dispatcher."""

    def test_task_runs_when_events_are_processed(self):
        ensure_qt_app()
        dispatcher = QtUiDispatcher()
        ran = []

        dispatcher.submit(lambda: ran.append(1))
        assert ran == []

        QCoreApplication.processEvents()
        assert ran == [1]

    def test_tasks_from_worker_thread_run_on_gui_thread_in_order(self):
        ensure_qt_app()
        dispatcher = QtUiDispatcher()
        ran = []

        def worker():
            for i in range(3):
                dispatcher.submit(lambda i=i: ran.append((i, threading.get_ident())))

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

        QCoreApplication.processEvents()

        assert [i for i, _ in ran] == [0, 1, 2]
        assert all(ident == threading.get_ident() for _, ident in ran)

    def test_failing_task_is_logged(self, caplog):
        ensure_qt_app()
        dispatcher = QtUiDispatcher()

        def broken():
            raise RuntimeError("task failed")

        dispatcher.submit(broken)
        QCoreApplication.processEvents()

        assert "UI task failed" in caplog.text
