"""Compositor IPC exceptions.

Transport errors (ConnectionFailedError, ConnectionLostError,
BufferOverflowError) are recoverable: the preview worker logs them and
retries on the next frame. InvalidSocketPathError is fatal to starting a
preview.
"""

from typing import Optional

from .base import HyprGBorderError


class IpcError(HyprGBorderError):
    """Communication with the compositor failed."""
    pass


class InvalidSocketPathError(IpcError):
    """The compositor control socket path cannot be determined."""

    def __init__(self, missing_variable: str):
        """
        Initialize invalid socket path error.

        Args:
            missing_variable: Name of the environment variable that is not set
        """
        super().__init__(
            user_message=f"Cannot locate the Hyprland socket: {missing_variable} is not set.",
            technical_message=f"Environment variable {missing_variable} missing while building socket path",
            recoverable=False,
            recovery_hint="Run hyprgborder from inside a Hyprland session",
        )
        self.missing_variable = missing_variable


class ConnectionFailedError(IpcError):
    """The control socket refused the connection or does not exist."""

    def __init__(self, socket_path: str, original_error: Optional[str] = None):
        """
        Initialize connection failed error.

        Args:
            socket_path: Path of the socket that could not be opened
            original_error: Error text from the OS (optional)
        """
        technical = f"Failed to connect to {socket_path}"
        if original_error:
            technical += f": {original_error}"
        super().__init__(
            user_message="Cannot connect to Hyprland. Make sure Hyprland is running.",
            technical_message=technical,
            recoverable=True,
            recovery_hint="Run 'hyprgborder env' to check the Hyprland environment",
        )
        self.socket_path = socket_path
        self.original_error = original_error


class ConnectionLostError(IpcError):
    """Writing to an open connection failed."""

    def __init__(self, socket_path: str, original_error: Optional[str] = None):
        """
        Initialize connection lost error.

        Args:
            socket_path: Path of the socket the connection was opened on
            original_error: Error text from the OS (optional)
        """
        technical = f"Connection to {socket_path} lost"
        if original_error:
            technical += f": {original_error}"
        super().__init__(
            user_message="Lost connection to Hyprland.",
            technical_message=technical,
            recoverable=True,
        )
        self.socket_path = socket_path
        self.original_error = original_error


class BufferOverflowError(IpcError):
    """A formatted command does not fit in the command buffer."""

    def __init__(self, required: int, capacity: int):
        """
        Initialize buffer overflow error.

        Args:
            required: Number of bytes the command needs
            capacity: Size of the command buffer
        """
        super().__init__(
            user_message="Command too long for the IPC buffer.",
            technical_message=f"Command needs {required} bytes, buffer holds {capacity}",
            recoverable=True,
        )
        self.required = required
        self.capacity = capacity
