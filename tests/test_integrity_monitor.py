from conftest import DummyWatcher
from proctor_app.core.services.integrity_monitor import IntegrityMonitor, IntegritySignal


def make_monitor():
    watcher = DummyWatcher()
    violations = []
    return IntegrityMonitor(watcher, violations.append), watcher, violations


def test_signals_before_arming_are_ignored():
    monitor, watcher, violations = make_monitor()

    monitor.report(IntegritySignal.FOCUS_LOST)

    assert violations == []
    assert watcher.start_count == 0


def test_first_signal_trips_and_removes_listeners():
    monitor, watcher, violations = make_monitor()
    monitor.arm()

    watcher.fire(IntegritySignal.PAGE_HIDDEN)
    monitor.report(IntegritySignal.FULLSCREEN_EXITED)

    assert violations == [IntegritySignal.PAGE_HIDDEN]
    assert monitor.tripped is True
    assert monitor.armed is False
    assert watcher.listening is False


def test_tripped_monitor_cannot_be_rearmed():
    monitor, watcher, violations = make_monitor()
    monitor.arm()
    watcher.fire(IntegritySignal.FOCUS_LOST)

    monitor.arm()

    assert watcher.start_count == 1
    assert monitor.armed is False


def test_arm_and_disarm_are_idempotent():
    monitor, watcher, _ = make_monitor()

    monitor.arm()
    monitor.arm()
    monitor.disarm()
    monitor.disarm()

    assert (watcher.start_count, watcher.stop_count) == (1, 1)


def test_paused_monitor_drops_its_own_window_deactivation():
    monitor, watcher, violations = make_monitor()
    monitor.arm()

    with monitor.paused():
        watcher.fire(IntegritySignal.WINDOW_DEACTIVATED)
    assert violations == []
    assert monitor.armed is True

    watcher.fire(IntegritySignal.UNLOAD_ATTEMPTED)
    assert violations == [IntegritySignal.UNLOAD_ATTEMPTED]


def test_signal_held_during_pause_is_reported_once_it_ends():
    monitor, watcher, violations = make_monitor()
    monitor.arm()

    with monitor.paused():
        watcher.fire(IntegritySignal.WINDOW_DEACTIVATED)
        watcher.fire(IntegritySignal.PAGE_HIDDEN)
        watcher.fire(IntegritySignal.FOCUS_LOST)
        assert violations == []

    assert violations == [IntegritySignal.PAGE_HIDDEN]
    assert monitor.tripped is True
    assert watcher.listening is False


def test_held_signal_is_dropped_when_disarmed_during_pause():
    monitor, watcher, violations = make_monitor()
    monitor.arm()

    with monitor.paused():
        watcher.fire(IntegritySignal.FULLSCREEN_EXITED)
        monitor.disarm()

    assert violations == []
    assert monitor.tripped is False


def test_window_deactivation_outside_pause_trips():
    monitor, watcher, violations = make_monitor()
    monitor.arm()

    watcher.fire(IntegritySignal.WINDOW_DEACTIVATED)

    assert violations == [IntegritySignal.WINDOW_DEACTIVATED]


def test_disarmed_monitor_ignores_signals():
    monitor, watcher, violations = make_monitor()
    monitor.arm()
    monitor.disarm()

    monitor.report(IntegritySignal.FOCUS_LOST)

    assert violations == []
    assert monitor.tripped is False
