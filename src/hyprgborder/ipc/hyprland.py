"""One-shot Hyprland IPC helpers.

Each helper opens a fresh connection, writes one command and closes it. The
preview worker uses the persistent ``IpcChannel`` instead; these cover
start/stop work such as border snapshots and one-off settings.
"""

import json
import logging
import os
import re
import socket
from dataclasses import dataclass

from hyprgborder.colors import hex_to_hyprland
from hyprgborder.exceptions import (
    ConnectionFailedError,
    ConnectionLostError,
    InvalidSocketPathError,
)

logger = logging.getLogger(__name__)

CONTROL_SOCKET = ".socket.sock"  # Dispatchers and keywords
EVENT_SOCKET = ".socket2.sock"  # Event stream (unused)

DEFAULT_BORDER = "0xffffffff"
ONE_SHOT_TIMEOUT = 1.0
MAX_REPLY_SIZE = 4096

_HEX_TOKEN = re.compile(r"^(0x)?[0-9a-fA-F]{8}$")
_ANGLE_TOKEN = re.compile(r"^-?\d+deg$")


class HyprlandBorderVars:
    """Hyprland configuration variables touched by border animations."""

    ACTIVE_BORDER = "general:col.active_border"
    INACTIVE_BORDER = "general:col.inactive_border"
    BORDER_SIZE = "general:border_size"
    NO_BORDER_ON_FLOATING = "general:no_border_on_floating"
    ROUNDING = "decoration:rounding"
    DROP_SHADOW = "decoration:drop_shadow"
    SHADOW_RANGE = "decoration:shadow_range"
    SHADOW_RENDER_POWER = "decoration:shadow_render_power"
    COL_SHADOW = "decoration:col.shadow"
    COL_SHADOW_INACTIVE = "decoration:col.shadow_inactive"


def get_socket_path() -> str:
    """
    Build the control socket path from the Hyprland environment.

    Returns:
        ``$XDG_RUNTIME_DIR/hypr/$HYPRLAND_INSTANCE_SIGNATURE/.socket.sock``

    Raises:
        InvalidSocketPathError: If either variable is unset
    """
    runtime = os.environ.get("XDG_RUNTIME_DIR")
    if not runtime:
        raise InvalidSocketPathError("XDG_RUNTIME_DIR")

    signature = os.environ.get("HYPRLAND_INSTANCE_SIGNATURE")
    if not signature:
        raise InvalidSocketPathError("HYPRLAND_INSTANCE_SIGNATURE")

    return os.path.join(runtime, "hypr", signature, CONTROL_SOCKET)


def _request(socket_path: str, command: str, read_reply: bool = False) -> bytes:
    """Send one command on a fresh connection, optionally reading the reply."""
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    sock.settimeout(ONE_SHOT_TIMEOUT)
    try:
        try:
            sock.connect(socket_path)
        except OSError as e:
            raise ConnectionFailedError(socket_path, str(e)) from e

        try:
            sock.sendall(command.encode("utf-8"))
            if not read_reply:
                return b""

            chunks = []
            received = 0
            while received < MAX_REPLY_SIZE:
                chunk = sock.recv(MAX_REPLY_SIZE - received)
                if not chunk:
                    break
                chunks.append(chunk)
                received += len(chunk)
            return b"".join(chunks)
        except OSError as e:
            raise ConnectionLostError(socket_path, str(e)) from e
    finally:
        sock.close()


def send_keyword_command(socket_path: str, variable: str, value: str) -> None:
    """
    Send ``keyword {variable} {value}`` on a one-shot connection.

    Raises:
        ConnectionFailedError: If the socket refuses the connection
        ConnectionLostError: If the write fails
    """
    _request(socket_path, f"keyword {variable} {value}\n")


def check_connection(socket_path: str) -> bool:
    """Return True if the compositor accepts a ``version`` request."""
    try:
        _request(socket_path, "version\n")
        return True
    except (ConnectionFailedError, ConnectionLostError) as e:
        logger.debug(f"Connection test failed: {e.technical_message}")
        return False


def get_current_border_config(socket_path: str) -> bytes:
    """
    Query the active border color.

    Returns:
        Raw JSON reply to ``j/getoption general:col.active_border``

    Raises:
        ConnectionFailedError: If the socket refuses the connection
        ConnectionLostError: If the request fails
    """
    return _request(
        socket_path, f"j/getoption {HyprlandBorderVars.ACTIVE_BORDER}\n", read_reply=True
    )


def _to_hyprland_color(color: str) -> str:
    """Accept ``#RRGGBB``, ``0xAARRGGBB`` or bare ``RRGGBB``."""
    if len(color) == 7 and color.startswith("#"):
        return hex_to_hyprland(color)
    if color.startswith("0x"):
        return color
    return f"0xff{color}"


def set_border_size(socket_path: str, size: int) -> None:
    """Set the border width in pixels."""
    send_keyword_command(socket_path, HyprlandBorderVars.BORDER_SIZE, str(size))


def set_border_rounding(socket_path: str, rounding: int) -> None:
    """Set the corner rounding radius."""
    send_keyword_command(socket_path, HyprlandBorderVars.ROUNDING, str(rounding))


def set_drop_shadow(socket_path: str, enabled: bool) -> None:
    """Enable or disable the drop shadow."""
    send_keyword_command(
        socket_path, HyprlandBorderVars.DROP_SHADOW, "true" if enabled else "false"
    )


def set_shadow_color(socket_path: str, color: str) -> None:
    """Set the shadow color (``#RRGGBB``, ``0xAARRGGBB`` or ``RRGGBB``)."""
    send_keyword_command(socket_path, HyprlandBorderVars.COL_SHADOW, _to_hyprland_color(color))


@dataclass(frozen=True, slots=True)
class BorderSnapshot:
    """
    Active border color captured before a preview starts.

    ``raw`` is the compositor's reply, kept opaque; ``border_value()``
    turns it back into a keyword value when restoring.
    """

    raw: bytes

    @classmethod
    def capture(cls, socket_path: str) -> "BorderSnapshot":
        """
        Read the current border from the compositor.

        Raises:
            ConnectionFailedError: If the socket refuses the connection
            ConnectionLostError: If the request fails
        """
        return cls(raw=get_current_border_config(socket_path))

    def border_value(self) -> str:
        """
        Rebuild a ``keyword general:col.active_border`` value from the reply.

        Returns the neutral default border when the reply cannot be parsed.
        """
        try:
            reply = json.loads(self.raw.decode("utf-8", errors="replace"))
        except ValueError:
            return DEFAULT_BORDER
        if not isinstance(reply, dict):
            return DEFAULT_BORDER

        text = reply.get("custom") or reply.get("str") or ""
        if not isinstance(text, str):
            return DEFAULT_BORDER

        colors = []
        angle = None
        for token in text.split():
            if _HEX_TOKEN.match(token):
                colors.append(token if token.startswith("0x") else f"0x{token}")
            elif _ANGLE_TOKEN.match(token):
                angle = token

        if not colors:
            return DEFAULT_BORDER
        if len(colors) > 1 and angle:
            colors.append(angle)
        return " ".join(colors)

    def restore(self, socket_path: str) -> None:
        """
        Send the captured border back to the compositor.

        Raises:
            ConnectionFailedError: If the socket refuses the connection
            ConnectionLostError: If the write fails
        """
        send_keyword_command(socket_path, HyprlandBorderVars.ACTIVE_BORDER, self.border_value())
