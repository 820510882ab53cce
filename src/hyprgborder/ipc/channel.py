"""Persistent connection to the Hyprland control socket."""

import logging
import socket
from typing import Optional

from hyprgborder.exceptions import ConnectionFailedError, ConnectionLostError

from .buffer import COMMAND_BUFFER_SIZE, CommandBuffer
from .hyprland import get_socket_path

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 1.0


class IpcChannel:
    """
    Reusable UNIX-socket connection to the compositor.

    Holds at most one open connection. Commands are formatted into a fixed
    CommandBuffer that is reused for every frame.

    Hyprland closes the control socket after answering a request, so before
    each write the channel checks whether the peer has hung up and reopens the
    stream if so. Write failures mark the channel disconnected and raise
    ConnectionLostError; the next send reconnects.

    ``epoch`` increments each time the channel recovers from a lost
    connection or is explicitly reconnected. Animations that skip redundant
    writes compare it to know when they must resend.

    Not thread-safe: owned by the preview worker thread.
    """

    def __init__(
        self,
        socket_path: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        buffer_size: int = COMMAND_BUFFER_SIZE,
    ):
        """
        Initialize the channel (does not connect).

        Args:
            socket_path: Control socket path. If None, derived from the
                         Hyprland environment variables.
            timeout: Socket connect/write timeout in seconds
            buffer_size: Command buffer capacity in bytes

        Raises:
            InvalidSocketPathError: If socket_path is None and the
                                    environment does not name a socket
        """
        self.socket_path = socket_path if socket_path is not None else get_socket_path()
        self._timeout = timeout
        self._buffer = CommandBuffer(buffer_size)
        self._sock: Optional[socket.socket] = None
        self._epoch = 0
        self._lost = False

    @property
    def is_connected(self) -> bool:
        """True while a connection is open."""
        return self._sock is not None

    @property
    def epoch(self) -> int:
        """Number of recoveries from lost connections or explicit reconnects."""
        return self._epoch

    def connect(self) -> None:
        """
        Open the connection if it is not already open.

        Raises:
            ConnectionFailedError: If the socket cannot be created, is missing or
                                   refuses the connection
        """
        if self._sock is not None:
            return

        sock = None
        try:
            sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
            sock.settimeout(self._timeout)
            sock.connect(self.socket_path)
        except OSError as e:
            if sock is not None:
                sock.close()
            raise ConnectionFailedError(self.socket_path, str(e)) from e

        self._sock = sock
        if self._lost:
            self._lost = False
            self._epoch += 1
            logger.info(f"Reconnected to compositor socket {self.socket_path}")
        else:
            logger.debug(f"Connected to compositor socket {self.socket_path}")

    def disconnect(self) -> None:
        """Close the connection if open."""
        if self._sock is None:
            return
        try:
            self._sock.close()
        except OSError as e:
            logger.debug(f"Error closing compositor socket: {e}")
        self._sock = None

    def reconnect(self) -> None:
        """
        Drop and reopen the connection.

        Raises:
            ConnectionFailedError: If the new connection cannot be opened
        """
        self.disconnect()
        self._lost = True
        self.connect()

    def send(self, command: bytes | bytearray | memoryview | str) -> None:
        """
        Write one command, connecting first if needed.

        Args:
            command: Complete command including the trailing newline

        Raises:
            ConnectionFailedError: If no connection could be opened
            ConnectionLostError: If the write failed (channel is now disconnected)
        """
        if isinstance(command, str):
            command = command.encode("utf-8")

        if self._sock is not None and self._peer_closed():
            self.disconnect()
        try:
            self.connect()
        except ConnectionFailedError:
            self._lost = True
            raise

        try:
            self._sock.sendall(command)
        except OSError as e:
            self.disconnect()
            self._lost = True
            raise ConnectionLostError(self.socket_path, str(e)) from e

    def send_keyword(self, variable: str, value: str) -> None:
        """
        Send ``keyword {variable} {value}``.

        Raises:
            BufferOverflowError: If the command does not fit the command buffer
            ConnectionFailedError: If no connection could be opened
            ConnectionLostError: If the write failed
        """
        self.send(self._buffer.format_keyword(variable, value))

    def test_connection(self) -> bool:
        """
        Check the compositor is reachable by reconnecting and sending ``version``.

        Returns:
            True if the write succeeded
        """
        try:
            self.reconnect()
            self.send(b"version\n")
            return True
        except (ConnectionFailedError, ConnectionLostError) as e:
            logger.debug(f"Connection test failed: {e.technical_message}")
            self._lost = True
            return False

    def _peer_closed(self) -> bool:
        """Drain pending replies; True if the compositor has closed the stream."""
        sock = self._sock
        # A socket with a timeout waits for readability before recv
        sock.setblocking(False)
        try:
            while True:
                data = sock.recv(4096)
                if not data:
                    return True
        except (BlockingIOError, InterruptedError):
            return False
        except OSError:
            return True
        finally:
            sock.settimeout(self._timeout)

    def __enter__(self):
        """Context manager entry."""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.disconnect()
