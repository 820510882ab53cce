"""Pytest fixtures for tests."""

import os
import socket
import threading
import time
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from hyprgborder.models import AnimationConfig, AnimationType


class FakeHyprlandServer:
    """
    UNIX stream server standing in for the Hyprland control socket.

    Records every newline-terminated command it receives. With
    ``close_after_command`` it hangs up after each batch of commands like
    the real compositor does; otherwise connections stay open.
    """

    def __init__(self, path: Path, close_after_command: bool = False):
        self.path = str(path)
        self.close_after_command = close_after_command
        self.replies: dict[str, bytes] = {}  # command prefix -> reply
        self.lines: list[str] = []
        self.connections = 0
        self.closed_connections = 0
        self._lock = threading.Lock()
        self._stop = threading.Event()

        self._sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        self._sock.bind(self.path)
        self._sock.listen(8)
        self._sock.settimeout(0.05)
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()

    def _serve(self) -> None:
        while not self._stop.is_set():
            try:
                conn, _ = self._sock.accept()
            except socket.timeout:
                continue
            except OSError:
                return
            with self._lock:
                self.connections += 1
            threading.Thread(target=self._handle, args=(conn,), daemon=True).start()

    def _handle(self, conn: socket.socket) -> None:
        conn.settimeout(0.05)
        pending = b""
        try:
            while not self._stop.is_set():
                try:
                    data = conn.recv(4096)
                except socket.timeout:
                    continue
                except OSError:
                    return
                if not data:
                    return

                pending += data
                while b"\n" in pending:
                    raw, pending = pending.split(b"\n", 1)
                    line = raw.decode("utf-8")
                    with self._lock:
                        self.lines.append(line)
                    for prefix, reply in self.replies.items():
                        if line.startswith(prefix):
                            conn.sendall(reply)
                            break

                if self.close_after_command:
                    return
        finally:
            conn.close()
            with self._lock:
                self.closed_connections += 1

    def received(self) -> list[str]:
        with self._lock:
            return list(self.lines)

    def wait_for(self, predicate, timeout: float = 2.0) -> bool:
        """Poll ``predicate(lines)`` until it holds or ``timeout`` passes."""
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            if predicate(self.received()):
                return True
            time.sleep(0.01)
        return predicate(self.received())

    def wait_for_closed(self, count: int, timeout: float = 2.0) -> bool:
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            with self._lock:
                if self.closed_connections >= count:
                    return True
            time.sleep(0.01)
        return False

    def close(self) -> None:
        if self._stop.is_set():
            return
        self._stop.set()
        self._sock.close()
        self._thread.join(timeout=1.0)
        if os.path.exists(self.path):
            os.unlink(self.path)


def wait_until(predicate, timeout: float = 2.0) -> bool:
    """Poll ``predicate()`` until it is true or ``timeout`` seconds pass."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def socket_path(temp_dir):
    """Short socket path (UNIX socket paths are limited to ~108 bytes)."""
    return temp_dir / ".socket.sock"


@pytest.fixture
def server(socket_path):
    """Fake compositor that keeps connections open."""
    srv = FakeHyprlandServer(socket_path)
    yield srv
    srv.close()


@pytest.fixture
def hyprland_server(socket_path):
    """Fake compositor that hangs up after every command, like Hyprland."""
    srv = FakeHyprlandServer(socket_path, close_after_command=True)
    yield srv
    srv.close()


@pytest.fixture
def make_server(socket_path):
    """Factory for fake compositors bound to the same path, e.g. to simulate a restart."""
    servers = []

    def _make(close_after_command: bool = False) -> FakeHyprlandServer:
        srv = FakeHyprlandServer(socket_path, close_after_command=close_after_command)
        servers.append(srv)
        return srv

    yield _make
    for srv in servers:
        srv.close()


@pytest.fixture
def pulse_config():
    return AnimationConfig(
        animation_type=AnimationType.PULSE, fps=120, speed=0.05, colors=["#FF8000"]
    )


@pytest.fixture
def gradient_config():
    return AnimationConfig(
        animation_type=AnimationType.GRADIENT,
        speed=1.0,
        colors=["#FF0000", "#00FF00", "#0000FF"],
    )


@pytest.fixture(name="wait_until")
def wait_until_fixture():
    """The ``wait_until(predicate, timeout)`` polling helper."""
    return wait_until
