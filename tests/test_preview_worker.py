"""Tests for the live preview worker."""

import threading
from unittest.mock import Mock, call, patch

import pytest

from hyprgborder.animations import SolidAnimation
from hyprgborder.core import PreviewWorker
from hyprgborder.exceptions import (
    ConnectionFailedError,
    ConnectionLostError,
    InvalidSocketPathError,
    PreviewAlreadyRunningError,
)
from hyprgborder.ipc import HyprlandBorderVars
from hyprgborder.models import AnimationConfig, PreviewStatus
from hyprgborder.protocols import PreviewEvent, PreviewObserver

FAKE_SOCKET = "/tmp/hyprgborder-test.sock"
THREAD_NAME = "hyprgborder-preview"


class FakeChannel:
    """In-memory stand-in for IpcChannel."""

    def __init__(self, socket_path: str):
        self.socket_path = socket_path
        self.epoch = 0
        self.sent: list[tuple[str, str]] = []
        self.fail_sends = False
        self.reachable = True
        self.disconnected = False
        self._lock = threading.Lock()

    def test_connection(self) -> bool:
        return self.reachable

    def send_keyword(self, variable: str, value: str) -> None:
        if self.fail_sends:
            raise ConnectionLostError(self.socket_path, "broken pipe")
        with self._lock:
            self.sent.append((variable, value))

    def values(self) -> list[str]:
        with self._lock:
            return [value for _, value in self.sent]

    def disconnect(self) -> None:
        self.disconnected = True


@pytest.fixture
def channels():
    return []


@pytest.fixture
def make_worker(channels):
    """Build workers on fake channels; every worker is stopped at teardown."""
    workers = []

    def factory(path):
        channel = FakeChannel(path)
        channels.append(channel)
        return channel

    def _make(config=None, **kwargs) -> PreviewWorker:
        kwargs.setdefault("socket_path", FAKE_SOCKET)
        kwargs.setdefault("channel_factory", factory)
        kwargs.setdefault("error_backoff", 0.01)
        kwargs.setdefault("restore_border", False)
        worker = PreviewWorker(config or AnimationConfig(fps=120), **kwargs)
        workers.append(worker)
        return worker

    yield _make
    for worker in workers:
        worker.stop()


def preview_threads() -> list[threading.Thread]:
    return [t for t in threading.enumerate() if t.name == THREAD_NAME]


@pytest.mark.integration
class TestPreviewLifecycle:
    """Test start/stop behaviour."""

    def test_start_and_stop(self, make_worker, channels, wait_until):
        worker = make_worker()
        assert worker.get_status() == PreviewStatus.STOPPED

        worker.start()

        assert worker.is_running
        assert wait_until(lambda: worker.get_stats().frames_rendered >= 3)
        assert worker.get_status() == PreviewStatus.RUNNING
        assert worker.get_stats().connection_ok is True

        worker.stop()

        assert not worker.is_running
        assert worker.get_status() == PreviewStatus.STOPPED
        assert channels[0].disconnected
        assert preview_threads() == []

    def test_frames_target_active_border(self, make_worker, channels, wait_until):
        worker = make_worker()
        worker.start()

        assert wait_until(lambda: len(channels[0].sent) >= 2)
        assert all(variable == HyprlandBorderVars.ACTIVE_BORDER for variable, _ in channels[0].sent)

    def test_start_twice_spawns_one_thread(self, make_worker):
        worker = make_worker()
        worker.start()
        worker.start()

        assert len(preview_threads()) == 1

    def test_start_from_two_threads(self, make_worker):
        entered = threading.Event()
        release = threading.Event()

        def slow_factory(path):
            entered.set()
            release.wait(5)
            return FakeChannel(path)

        worker = make_worker(channel_factory=slow_factory)
        errors = []

        def start_in_background():
            try:
                worker.start()
            except Exception as e:
                errors.append(e)

        starter = threading.Thread(target=start_in_background)
        starter.start()
        assert entered.wait(5)

        worker.start()

        release.set()
        starter.join(5)
        assert errors == []
        assert worker.is_running
        assert len(preview_threads()) == 1

    def test_stop_without_start_is_noop(self, make_worker):
        worker = make_worker()
        worker.stop()
        worker.stop()
        assert worker.get_status() == PreviewStatus.STOPPED

    def test_restart(self, make_worker, channels, wait_until):
        worker = make_worker()
        worker.start()
        worker.stop()
        worker.start()

        assert wait_until(lambda: len(channels[1].sent) > 0)
        assert worker.get_status() == PreviewStatus.RUNNING

    def test_context_manager(self, make_worker):
        with make_worker() as worker:
            assert worker.is_running
        assert not worker.is_running

    def test_one_worker_per_process(self, make_worker):
        first = make_worker()
        second = make_worker()
        first.start()

        with pytest.raises(PreviewAlreadyRunningError):
            second.start()

        first.stop()
        second.start()
        assert second.is_running

    def test_unreachable_compositor(self, make_worker):
        def unreachable(path):
            channel = FakeChannel(path)
            channel.reachable = False
            return channel

        worker = make_worker(channel_factory=unreachable)

        with pytest.raises(ConnectionFailedError):
            worker.start()

        assert worker.get_status() == PreviewStatus.ERROR
        assert not worker.is_running

        # The failed start does not hold the per-process slot
        other = make_worker()
        other.start()
        assert other.is_running

    def test_missing_socket_environment(self, make_worker, monkeypatch):
        monkeypatch.delenv("XDG_RUNTIME_DIR", raising=False)
        worker = make_worker(socket_path=None)

        with pytest.raises(InvalidSocketPathError):
            worker.start()

        assert worker.get_status() == PreviewStatus.ERROR


@pytest.mark.integration
class TestPreviewFrames:
    """Test the frame loop."""

    def test_transport_errors_are_recovered(self, make_worker, channels, wait_until):
        worker = make_worker()
        worker.start()
        assert wait_until(lambda: worker.get_status() == PreviewStatus.RUNNING)

        channel = channels[0]
        channel.reachable = False
        channel.fail_sends = True

        assert wait_until(lambda: worker.get_status() == PreviewStatus.ERROR)
        assert worker.get_stats().connection_ok is False
        assert worker.is_running

        channel.reachable = True
        channel.fail_sends = False

        assert wait_until(lambda: worker.get_status() == PreviewStatus.RUNNING)
        assert wait_until(lambda: worker.get_stats().connection_ok)

    def test_failed_frame_with_reachable_compositor_keeps_running(self, make_worker, channels, wait_until):
        worker = make_worker()
        worker.start()
        assert wait_until(lambda: worker.get_status() == PreviewStatus.RUNNING)

        channels[0].fail_sends = True
        assert wait_until(lambda: not worker.get_stats().connection_ok)

        assert worker.get_status() == PreviewStatus.RUNNING

    def test_socket_errors_during_connection_test_are_survived(self, make_worker, channels, wait_until):
        worker = make_worker()
        worker.start()
        assert wait_until(lambda: worker.get_status() == PreviewStatus.RUNNING)

        channel = channels[0]
        channel.test_connection = Mock(side_effect=OSError(24, "Too many open files"))
        channel.fail_sends = True

        assert wait_until(lambda: worker.get_status() == PreviewStatus.ERROR)
        assert wait_until(lambda: channel.test_connection.call_count >= 2)
        assert worker.is_running

        channel.fail_sends = False

        assert wait_until(lambda: worker.get_status() == PreviewStatus.RUNNING)

    def test_unrecoverable_error_reports_error_while_reachable(self, make_worker, wait_until):
        provider = Mock()
        provider.update.side_effect = InvalidSocketPathError("XDG_RUNTIME_DIR")

        with patch("hyprgborder.core.preview.create_animation_provider", return_value=provider):
            worker = make_worker()
            worker.start()

            assert wait_until(lambda: worker.get_status() == PreviewStatus.ERROR)
            assert worker.is_running

            provider.update.side_effect = None

            assert wait_until(lambda: worker.get_status() == PreviewStatus.RUNNING)
            worker.stop()

    def test_provider_errors_are_retried(self, make_worker, wait_until):
        provider = Mock()
        provider.configure.side_effect = RuntimeError("bad colors")

        with patch("hyprgborder.core.preview.create_animation_provider", return_value=provider):
            worker = make_worker()
            worker.start()

            assert wait_until(lambda: worker.get_status() == PreviewStatus.ERROR)
            assert wait_until(lambda: provider.configure.call_count >= 2)
            assert worker.is_running

            provider.configure.side_effect = None

            assert wait_until(lambda: worker.get_status() == PreviewStatus.RUNNING)
            worker.stop()

    def test_loop_crash_reports_error(self, make_worker, wait_until):
        observer = Mock(spec=PreviewObserver)
        worker = make_worker()
        worker.register_observer(observer)
        worker._stats.record_frame = Mock(side_effect=RuntimeError("boom"))

        worker.start()

        assert wait_until(lambda: not worker.is_running)
        assert worker.get_status() == PreviewStatus.ERROR
        observer.on_preview_event.assert_any_call(PreviewEvent.ERROR, PreviewStatus.ERROR)

        worker.stop()
        assert worker.get_status() == PreviewStatus.STOPPED

    def test_ui_edits_to_running_config(self, make_worker, channels, wait_until):
        config = AnimationConfig(animation_type="solid", fps=120, colors=["#0000FF"])
        worker = make_worker(config)
        worker.start()
        assert wait_until(lambda: channels[0].values() == ["0xff0000FF"])

        edited = worker.get_config()
        edited.colors.insert(0, "#00FF00")
        edited.speed = "0.5"

        assert worker.update_config(edited) is True
        assert wait_until(lambda: "0xff00FF00" in channels[0].values())

        frames = worker.get_stats().frames_rendered
        assert wait_until(lambda: worker.get_stats().frames_rendered > frames)
        assert worker.is_running
        assert worker.get_status() == PreviewStatus.RUNNING
        assert worker.get_config().speed == 0.5

    def test_config_swap_rebuilds_provider(self, make_worker, channels, wait_until):
        worker = make_worker(AnimationConfig(fps=120))
        worker.start()
        assert wait_until(lambda: len(channels[0].sent) > 0)

        worker.update_config(AnimationConfig(animation_type="solid", fps=120, colors=["#00FF00"]))

        assert wait_until(lambda: "0xff00FF00" in channels[0].values())
        assert isinstance(worker._provider, SolidAnimation)

    def test_solid_sends_once(self, make_worker, channels, wait_until):
        config = AnimationConfig(animation_type="solid", fps=120, colors=["#0000FF"])
        worker = make_worker(config)
        worker.start()

        assert wait_until(lambda: worker.get_stats().frames_rendered >= 10)
        assert channels[0].values() == ["0xff0000FF"]

    def test_config_is_copied(self, make_worker):
        config = AnimationConfig(animation_type="solid", fps=120, colors=["#0000FF"])
        worker = make_worker(config)

        config.fps = 1

        assert worker.get_config().fps == 120
        assert worker.get_config() is not worker.get_config()


@pytest.mark.integration
class TestPreviewObservers:
    """Test observer notifications."""

    def test_lifecycle_events(self, make_worker, wait_until):
        observer = Mock(spec=PreviewObserver)
        worker = make_worker()
        worker.register_observer(observer)

        worker.start()
        assert wait_until(lambda: worker.get_stats().frames_rendered > 0)
        worker.stop()

        events = observer.on_preview_event.call_args_list
        assert call(PreviewEvent.STARTED, PreviewStatus.RUNNING) in events
        assert call(PreviewEvent.STOPPED, PreviewStatus.STOPPED) == events[-1]

    def test_unregistered_observer_is_not_called(self, make_worker):
        observer = Mock(spec=PreviewObserver)
        worker = make_worker()
        worker.register_observer(observer)
        worker.unregister_observer(observer)

        worker.start()
        worker.stop()

        observer.on_preview_event.assert_not_called()


@pytest.mark.integration
class TestBorderRestore:
    """Test border capture on start and restore on stop."""

    def test_restores_captured_border(self, make_worker):
        snapshot = Mock()
        with patch("hyprgborder.core.preview.BorderSnapshot") as snapshot_cls:
            snapshot_cls.capture.return_value = snapshot
            worker = make_worker(restore_border=True)
            worker.start()
            worker.stop()

        snapshot_cls.capture.assert_called_once_with(FAKE_SOCKET)
        snapshot.restore.assert_called_once_with(FAKE_SOCKET)

    def test_capture_failure_is_not_fatal(self, make_worker):
        with patch("hyprgborder.core.preview.BorderSnapshot") as snapshot_cls:
            snapshot_cls.capture.side_effect = ConnectionFailedError(FAKE_SOCKET)
            worker = make_worker(restore_border=True)
            worker.start()
            assert worker.is_running
            worker.stop()

        assert worker.get_status() == PreviewStatus.STOPPED

    def test_restore_failure_is_not_fatal(self, make_worker):
        snapshot = Mock()
        snapshot.restore.side_effect = ConnectionLostError(FAKE_SOCKET)
        with patch("hyprgborder.core.preview.BorderSnapshot") as snapshot_cls:
            snapshot_cls.capture.return_value = snapshot
            worker = make_worker(restore_border=True)
            worker.start()
            worker.stop()

        assert worker.get_status() == PreviewStatus.STOPPED
        assert not worker.is_running

    def test_real_socket_round_trip(self, hyprland_server):
        hyprland_server.replies["j/getoption"] = (
            b'{"option": "general:col.active_border", "custom": "ffff0000 0deg", "set": true}'
        )
        worker = PreviewWorker(
            AnimationConfig(animation_type="pulse", fps=60, colors=["#00FF00"]),
            socket_path=hyprland_server.path,
            error_backoff=0.01,
        )
        try:
            worker.start()
            assert hyprland_server.wait_for(
                lambda lines: any(line.startswith("keyword general:col.active_border 0xff00") for line in lines)
            )
        finally:
            worker.stop()

        assert hyprland_server.wait_for(
            lambda lines: "keyword general:col.active_border 0xffff0000" in lines
        )
