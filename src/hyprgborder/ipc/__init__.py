"""Compositor IPC: socket path, persistent channel and one-shot helpers."""

from .buffer import COMMAND_BUFFER_SIZE, CommandBuffer
from .channel import IpcChannel
from .hyprland import (
    DEFAULT_BORDER,
    BorderSnapshot,
    HyprlandBorderVars,
    check_connection,
    get_current_border_config,
    get_socket_path,
    send_keyword_command,
    set_border_rounding,
    set_border_size,
    set_drop_shadow,
    set_shadow_color,
)

__all__ = [
    "COMMAND_BUFFER_SIZE",
    "DEFAULT_BORDER",
    "BorderSnapshot",
    "CommandBuffer",
    "HyprlandBorderVars",
    "IpcChannel",
    "check_connection",
    "get_current_border_config",
    "get_socket_path",
    "send_keyword_command",
    "set_border_rounding",
    "set_border_size",
    "set_drop_shadow",
    "set_shadow_color",
]
