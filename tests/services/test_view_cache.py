"""Unit tests for ViewCache."""

import threading
import time

import pytest

from view_coordinator.core import LoadedView
from view_coordinator.services import ViewCache


class HomeView:
    pass


class SettingsView:
    pass


@pytest.fixture
def cache():
    """Provide a fresh cache instance for each test."""
    return ViewCache()


def test_get_returns_none_for_missing_entry(cache):
    assert cache.get(HomeView) is None
    assert HomeView not in cache
    assert len(cache) == 0


def test_put_and_get(cache):
    view = LoadedView(root="root", controller=HomeView())
    cache.put(HomeView, view)

    assert cache.get(HomeView) is view
    assert HomeView in cache
    assert cache.keys() == [HomeView]


def test_evict_returns_removed_entry(cache):
    view = LoadedView(root="root", controller=HomeView())
    cache.put(HomeView, view)

    assert cache.evict(HomeView) is view
    assert cache.evict(HomeView) is None
    assert len(cache) == 0


def test_clear_removes_everything(cache):
    cache.put(HomeView, LoadedView("a", HomeView()))
    cache.put(SettingsView, LoadedView("b", SettingsView()))

    cache.clear()

    assert len(cache) == 0


def test_get_or_load_loads_on_miss_and_reuses_on_hit(cache):
    calls = []

    def load():
        calls.append(1)
        return LoadedView("root", HomeView())

    first, loaded_first = cache.get_or_load(HomeView, load)
    second, loaded_second = cache.get_or_load(HomeView, load)

    assert loaded_first is True
    assert loaded_second is False
    assert first is second
    assert len(calls) == 1


def test_get_or_load_stores_nothing_when_load_fails(cache):
    def load():
        raise RuntimeError("broken view")

    with pytest.raises(RuntimeError, match="broken view"):
        cache.get_or_load(HomeView, load)

    assert HomeView not in cache


def test_concurrent_misses_load_once(cache):
    calls = []
    start = threading.Barrier(8)
    results = []

    def load():
        calls.append(1)
        time.sleep(0.01)
        return LoadedView("root", HomeView())

    def worker():
        start.wait()
        results.append(cache.get_or_load(HomeView, load)[0])

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert all(view is results[0] for view in results)


def test_concurrent_inserts_of_distinct_keys_are_not_lost(cache):
    view_types = [type(f"View{i}", (), {}) for i in range(50)]

    def worker(view_type):
        cache.get_or_load(view_type, lambda: LoadedView("root", view_type()))

    threads = [threading.Thread(target=worker, args=(vt,)) for vt in view_types]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(cache) == 50
    assert set(cache.keys()) == set(view_types)


def test_get_or_load_replaces_entry_rejected_by_valid(cache):
    stale = LoadedView("stale", SettingsView())
    cache.put(HomeView, stale)

    view, loaded = cache.get_or_load(
        HomeView,
        lambda: LoadedView("fresh", HomeView()),
        valid=lambda entry: isinstance(entry.controller, HomeView),
    )

    assert loaded is True
    assert view.root == "fresh"
    assert cache.get(HomeView) is view


def test_get_or_load_keeps_entry_accepted_by_valid(cache):
    current = LoadedView("root", HomeView())
    cache.put(HomeView, current)

    view, loaded = cache.get_or_load(
        HomeView,
        lambda: LoadedView("fresh", HomeView()),
        valid=lambda entry: True,
    )

    assert loaded is False
    assert view is current
