"""
Unit tests for the in-memory admin session store.
It asserts expected behavior and guards against regressions in the corresponding component.
"""

from __future__ import annotations

from union_cms.api.session_store import SessionStore


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_created_session_is_retrievable() -> None:
    store = SessionStore(max_age_seconds=60, clock=FakeClock())
    session = store.create(admin_id=1, username="admin")

    assert store.get(session.session_id) == session
    assert session.expires_at == 1060.0


def test_session_ids_are_unique() -> None:
    store = SessionStore(max_age_seconds=60)
    first = store.create(admin_id=1, username="admin")
    second = store.create(admin_id=1, username="admin")

    assert first.session_id != second.session_id
    assert len(store) == 2


def test_expired_session_is_dropped_on_access() -> None:
    clock = FakeClock()
    store = SessionStore(max_age_seconds=60, clock=clock)
    session = store.create(admin_id=1, username="admin")

    clock.now += 61

    assert store.get(session.session_id) is None
    assert len(store) == 0


def test_destroy_and_purge() -> None:
    clock = FakeClock()
    store = SessionStore(max_age_seconds=60, clock=clock)
    kept = store.create(admin_id=1, username="admin")
    store.create(admin_id=2, username="editor")

    assert store.destroy(kept.session_id) is True
    assert store.destroy(kept.session_id) is False
    assert store.get(None) is None

    clock.now += 120
    assert store.purge_expired() == 1
    assert len(store) == 0


def test_login_sweeps_sessions_that_expired_unvisited() -> None:
    clock = FakeClock()
    store = SessionStore(max_age_seconds=60, clock=clock)
    for admin_id in range(1000):
        store.create(admin_id=admin_id, username="admin")

    clock.now += 61
    fresh = store.create(admin_id=1, username="admin")

    assert len(store) == 1
    assert store.get(fresh.session_id) == fresh
