"""Live border preview running on a background thread."""

import logging
import threading
import time
from typing import Callable, Optional

from hyprgborder.animations import AnimationProvider, create_animation_provider
from hyprgborder.exceptions import (
    ConnectionFailedError,
    HyprGBorderError,
    InvalidSocketPathError,
    PreviewAlreadyRunningError,
    handle_errors,
)
from hyprgborder.ipc import BorderSnapshot, IpcChannel, get_socket_path
from hyprgborder.models import AnimationConfig, PreviewStats, PreviewStatus
from hyprgborder.protocols import PreviewEvent, PreviewObserver
from hyprgborder.utils import ObserverManager

from .config_gate import ConfigGate
from .status import StatsTracker, StatusCell

logger = logging.getLogger(__name__)

ERROR_BACKOFF = 0.1  # Seconds to wait after a failed frame

# At most one worker drives the compositor border per process
_active_lock = threading.Lock()
_active_worker: Optional["PreviewWorker"] = None


class PreviewWorker:
    """
    Streams border animation frames to Hyprland while the user edits settings.

    Status transitions::

        STOPPED -> STARTING -> RUNNING -> STOPPED
                                  ^  |
                                  |  v
                                 ERROR

    ``start()`` returns once the thread is spawned. The thread renders one
    frame per tick at the configured FPS, picking up new configurations
    published through ``update_config()`` at the start of a tick. A failed
    frame never ends the loop: the frame is dropped, the connection is
    tested, and the next tick retries after a short backoff. If the loop
    itself breaks, the status is left at ERROR rather than RUNNING.

    ``stop()`` joins the thread and puts the border back the way it was
    before ``start()``.

    Example:
        ```python
        with PreviewWorker(AnimationConfig(animation_type="pulse", colors=["#FF8000"])) as worker:
            worker.update_config(new_config)
            time.sleep(5)
        ```
    """

    def __init__(
        self,
        config: Optional[AnimationConfig] = None,
        socket_path: Optional[str] = None,
        channel_factory: Callable[[str], IpcChannel] = IpcChannel,
        error_backoff: float = ERROR_BACKOFF,
        restore_border: bool = True,
    ):
        """
        Initialize the worker (does not start it).

        Args:
            config: Initial animation configuration (default rainbow)
            socket_path: Control socket path; resolved from the environment
                         at start() when None
            channel_factory: Builds the frame channel from a socket path
            error_backoff: Seconds to wait after a failed frame
            restore_border: Capture the border on start and restore it on stop

        Raises:
            ConfigValidationError: If config is invalid
        """
        self._gate = ConfigGate(config)
        self._socket_path = socket_path
        self._channel_factory = channel_factory
        self._error_backoff = error_backoff
        self._restore_border = restore_border

        self._status = StatusCell()
        self._stats = StatsTracker()
        self._observers = ObserverManager[PreviewObserver](observer_type_name="preview")

        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._channel: Optional[IpcChannel] = None
        self._provider: Optional[AnimationProvider] = None
        self._snapshot: Optional[BorderSnapshot] = None
        self._resolved_path: Optional[str] = None

    # =================================================================
    # Lifecycle
    # =================================================================

    def start(self) -> None:
        """
        Start streaming frames.

        Does nothing if this worker is already running.

        Raises:
            PreviewAlreadyRunningError: If another worker is running
            InvalidSocketPathError: If the socket path cannot be determined
            ConnectionFailedError: If the compositor does not answer
        """
        global _active_worker

        if self._thread is not None:
            logger.warning("Preview already running")
            return

        with _active_lock:
            if _active_worker is self:
                logger.warning("Preview already starting")
                return
            if _active_worker is not None:
                raise PreviewAlreadyRunningError()
            _active_worker = self

        try:
            self._prepare()
        except Exception:
            self._release_slot()
            raise

        self._status.store(PreviewStatus.STARTING)
        self._stop_event.clear()
        self._gate.mark_changed()
        self._stats.reset()

        self._thread = threading.Thread(
            target=self._run, name="hyprgborder-preview", daemon=True
        )
        self._thread.start()
        logger.info(f"Preview started on {self._resolved_path}")

    def stop(self) -> None:
        """Stop streaming and restore the original border. No-op if not running."""
        if self._thread is None:
            return

        self._stop_event.set()
        self._thread.join()
        self._thread = None

        if self._provider is not None:
            self._provider.cleanup()
            self._provider = None

        if self._snapshot is not None:
            self._restore_snapshot(self._snapshot)
            self._snapshot = None

        if self._channel is not None:
            self._channel.disconnect()
            self._channel = None

        self._release_slot()
        self._set_status(PreviewStatus.STOPPED, PreviewEvent.STOPPED)
        logger.info("Preview stopped")

    def _prepare(self) -> None:
        """Resolve the socket, check the compositor and capture the border."""
        try:
            socket_path = self._socket_path or get_socket_path()
        except InvalidSocketPathError:
            self._status.store(PreviewStatus.ERROR)
            raise

        channel = self._channel_factory(socket_path)
        if not channel.test_connection():
            channel.disconnect()
            self._status.store(PreviewStatus.ERROR)
            raise ConnectionFailedError(socket_path, "version request failed")

        self._resolved_path = socket_path
        self._channel = channel
        if self._restore_border:
            self._snapshot = self._capture_snapshot(socket_path)

    def _release_slot(self) -> None:
        global _active_worker
        with _active_lock:
            if _active_worker is self:
                _active_worker = None

    @handle_errors(operation_name="capture border", re_raise=False, log_level=logging.WARNING)
    def _capture_snapshot(self, socket_path: str) -> Optional[BorderSnapshot]:
        return BorderSnapshot.capture(socket_path)

    @handle_errors(operation_name="restore border", re_raise=False, log_level=logging.WARNING)
    def _restore_snapshot(self, snapshot: BorderSnapshot) -> None:
        snapshot.restore(self._resolved_path)
        logger.debug("Original border restored")

    # =================================================================
    # Frame loop
    # =================================================================

    def _run(self) -> None:
        """Thread body: one provider update per tick until stop is requested."""
        self._set_status(PreviewStatus.RUNNING, PreviewEvent.STARTED)
        try:
            self._frame_loop()
        except Exception as e:
            logger.critical(f"Preview loop crashed: {e}", exc_info=True)
            self._set_status(PreviewStatus.ERROR, PreviewEvent.ERROR)
            return
        logger.debug("Preview loop exited")

    def _frame_loop(self) -> None:
        started = time.monotonic()

        while not self._stop_event.is_set():
            try:
                config = self._apply_pending_config()
                self._provider.update(self._channel, time.monotonic() - started)
            except HyprGBorderError as e:
                logger.warning(f"Frame failed: {e.technical_message}")
                self._handle_frame_error(recoverable=e.recoverable)
                self._stop_event.wait(self._error_backoff)
                continue
            except Exception as e:
                logger.error(f"Unexpected error rendering frame: {e}", exc_info=True)
                self._handle_frame_error(recoverable=False)
                self._stop_event.wait(self._error_backoff)
                continue

            self._stats.record_frame(time.monotonic())
            if self._status.load() is PreviewStatus.ERROR:
                logger.info("Preview recovered")
                self._set_status(PreviewStatus.RUNNING, PreviewEvent.RECOVERED)

            self._stop_event.wait(1.0 / max(config.fps, 1))

    def _apply_pending_config(self) -> AnimationConfig:
        """Rebuild or reconfigure the provider if a new configuration was published."""
        changed = self._gate.take_changed()
        config = self._gate.current()
        if not changed:
            return config

        try:
            if self._provider is None or self._provider.animation_type != config.animation_type:
                if self._provider is not None:
                    self._provider.cleanup()
                self._provider = create_animation_provider(config.animation_type)
                logger.debug(f"Switched to {self._provider!r}")

            self._provider.configure(config)
        except Exception:
            # Retry on the next tick instead of rendering with a stale setup
            self._gate.mark_changed()
            raise

        self._observers.notify("on_preview_event", PreviewEvent.CONFIG_APPLIED, self._status.load())
        return config

    def _handle_frame_error(self, recoverable: bool) -> None:
        """
        Classify a failed frame.

        A recoverable failure only counts as ERROR when the compositor no
        longer answers. Anything else means frames cannot be rendered at all,
        so it is ERROR even while the socket is fine.
        """
        self._stats.set_connection(False)
        try:
            reachable = self._channel.test_connection()
        except Exception as e:
            logger.error(f"Connection test failed unexpectedly: {e}", exc_info=True)
            reachable = False

        if reachable and recoverable:
            return
        if self._status.load() is not PreviewStatus.ERROR:
            if not reachable:
                logger.error(f"Compositor unreachable at {self._resolved_path}")
            self._set_status(PreviewStatus.ERROR, PreviewEvent.ERROR)

    def _set_status(self, status: PreviewStatus, event: PreviewEvent) -> None:
        self._status.store(status)
        self._observers.notify("on_preview_event", event, status)

    # =================================================================
    # Foreground API
    # =================================================================

    def update_config(self, config: AnimationConfig) -> bool:
        """
        Publish a new configuration; the worker applies it on its next tick.

        Args:
            config: New configuration; copied, so the caller may keep editing it

        Returns:
            True if accepted, False if it could not be copied

        Raises:
            ConfigValidationError: If the configuration is invalid
        """
        return self._gate.update_config(config)

    def get_config(self) -> AnimationConfig:
        """Editable copy of the active configuration."""
        return self._gate.snapshot()

    def get_status(self) -> PreviewStatus:
        return self._status.load()

    def get_stats(self) -> PreviewStats:
        """Copy of the frame statistics."""
        return self._stats.snapshot()

    @property
    def is_running(self) -> bool:
        """True while the worker thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    def register_observer(self, observer: PreviewObserver) -> None:
        self._observers.register(observer)

    def unregister_observer(self, observer: PreviewObserver) -> None:
        self._observers.unregister(observer)

    def __enter__(self):
        """Context manager entry."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.stop()
