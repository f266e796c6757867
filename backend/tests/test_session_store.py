from pitch_expert.core.i18n import Language
from pitch_expert.core.session_store import SessionStore


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_sessions_are_isolated():
    store = SessionStore()
    first = store.create(Language.en)
    second = store.create(Language.ar)

    assert first.id != second.id
    assert store.get(first.id) is first
    assert store.get(second.id).language == Language.ar
    assert store.get("unknown") is None
    assert store.get(None) is None


def test_idle_session_expires():
    clock = FakeClock()
    store = SessionStore(idle_seconds=60, clock=clock)
    session = store.create(Language.en)

    clock.now = 60.0

    assert store.get(session.id) is None
    assert len(store) == 0


def test_activity_keeps_session_alive():
    clock = FakeClock()
    store = SessionStore(idle_seconds=60, clock=clock)
    session = store.create(Language.en)

    for step in (50.0, 100.0, 150.0):
        clock.now = step
        assert store.get(session.id) is session


def test_abandoned_sessions_do_not_accumulate():
    clock = FakeClock()
    store = SessionStore(idle_seconds=10, clock=clock)
    for _ in range(500):
        store.create(Language.en)
    assert len(store) == 500

    clock.now = 10.0
    store.create(Language.en)

    assert len(store) == 1
