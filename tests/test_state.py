import asyncio
import pytest
from app.state.observable import ObservableState
from app.state.scope import ScopeCancelledError, TaskScope

def test_observers_notified_on_every_set():
    state = ObservableState()
    seen = []
    state.subscribe(seen.append)

    state.set_value(1)
    state.set_value(1)
    assert seen == [1, 1]
    assert state.value == 1

def test_unsubscribe_stops_notifications():
    state = ObservableState(initial="unset")
    seen = []
    unsubscribe = state.subscribe(seen.append, replay=True)
    state.set_value("first")
    unsubscribe()
    unsubscribe()
    state.set_value("second")

    assert seen == ["unset", "first"]

def test_failing_observer_does_not_block_others():
    state = ObservableState()
    seen = []

    def broken(value):
        raise RuntimeError("render failed")

    state.subscribe(broken)
    state.subscribe(seen.append)
    state.set_value("x")
    assert seen == ["x"]

def test_read_only_view_tracks_source():
    state = ObservableState()
    view = state.as_read_only()
    state.set_value([1, 2])

    assert view.value == [1, 2]
    assert not hasattr(view, "set_value")

@pytest.mark.asyncio
async def test_scope_tracks_and_releases_tasks():
    scope = TaskScope()
    task = scope.launch(asyncio.sleep(0, result="done"))
    assert scope.active == 1

    await scope.join()
    assert task.result() == "done"
    assert scope.active == 0

@pytest.mark.asyncio
async def test_cancelled_scope_cancels_and_refuses_work():
    scope = TaskScope(name="test")
    task = scope.launch(asyncio.Event().wait())
    await asyncio.sleep(0)

    scope.cancel()
    scope.cancel()
    await scope.join()

    assert scope.cancelled
    assert task.cancelled()
    with pytest.raises(ScopeCancelledError):
        scope.launch(asyncio.sleep(0))

def test_failing_observer_on_replay_still_subscribes():
    state = ObservableState(initial="x")
    calls = []

    def broken(value):
        calls.append(value)
        raise RuntimeError("render failed")

    unsubscribe = state.subscribe(broken, replay=True)
    assert calls == ["x"]

    unsubscribe()
    state.set_value("y")
    assert calls == ["x"]

def test_launch_without_running_loop_closes_coroutine():
    async def work():
        return "never"

    coro = work()
    with pytest.raises(RuntimeError):
        TaskScope().launch(coro)
    assert coro.cr_frame is None
