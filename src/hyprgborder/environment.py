"""Hyprland session detection."""

import logging
import os
import stat
import subprocess
from dataclasses import dataclass, field
from typing import Optional

from hyprgborder.exceptions import (
    HyprlandNotRunningError,
    MissingEnvironmentVariableError,
    SocketNotAccessibleError,
)
from hyprgborder.ipc.hyprland import CONTROL_SOCKET

logger = logging.getLogger(__name__)

REQUIRED_VARIABLES = ("XDG_RUNTIME_DIR", "HYPRLAND_INSTANCE_SIGNATURE")
COMMAND_TIMEOUT = 2.0


@dataclass
class EnvironmentStatus:
    """Result of probing the current session."""

    hyprland_running: bool = False
    xdg_runtime_dir: Optional[str] = None
    hyprland_instance_signature: Optional[str] = None
    socket_path: Optional[str] = None
    socket_accessible: bool = False
    hyprland_version: Optional[str] = None
    errors: list[str] = field(default_factory=list)

    @property
    def missing_variables(self) -> list[str]:
        values = {
            "XDG_RUNTIME_DIR": self.xdg_runtime_dir,
            "HYPRLAND_INSTANCE_SIGNATURE": self.hyprland_instance_signature,
        }
        return [name for name in REQUIRED_VARIABLES if not values[name]]

    @property
    def is_valid(self) -> bool:
        """True if a preview can be started."""
        return self.hyprland_running and not self.missing_variables and self.socket_accessible


def _run_command(args: list[str]) -> Optional[subprocess.CompletedProcess]:
    """Run a helper binary; None if it is not installed or hangs."""
    try:
        return subprocess.run(
            args, capture_output=True, text=True, timeout=COMMAND_TIMEOUT, check=False
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug(f"Could not run {args[0]}: {e}")
        return None


def is_hyprland_running() -> bool:
    """True if a process named exactly ``Hyprland`` exists."""
    result = _run_command(["pgrep", "-x", "Hyprland"])
    return result is not None and result.returncode == 0


def get_hyprland_version() -> Optional[str]:
    """First line of ``hyprctl version``, or None."""
    result = _run_command(["hyprctl", "version"])
    if result is None or result.returncode != 0:
        return None
    lines = result.stdout.strip().splitlines()
    return lines[0] if lines else None


def is_socket_accessible(path: str) -> bool:
    try:
        return stat.S_ISSOCK(os.stat(path).st_mode)
    except OSError:
        return False


def check_environment() -> EnvironmentStatus:
    """
    Probe the session without raising.

    Returns:
        EnvironmentStatus with one entry in ``errors`` per problem found
    """
    status = EnvironmentStatus(
        xdg_runtime_dir=os.environ.get("XDG_RUNTIME_DIR") or None,
        hyprland_instance_signature=os.environ.get("HYPRLAND_INSTANCE_SIGNATURE") or None,
    )

    status.hyprland_running = is_hyprland_running()
    if not status.hyprland_running:
        status.errors.append("Hyprland process not found")

    for name in status.missing_variables:
        status.errors.append(f"{name} not set")

    if not status.missing_variables:
        status.socket_path = os.path.join(
            status.xdg_runtime_dir, "hypr", status.hyprland_instance_signature, CONTROL_SOCKET
        )
        status.socket_accessible = is_socket_accessible(status.socket_path)
        if not status.socket_accessible:
            status.errors.append(f"Socket not accessible: {status.socket_path}")

    if status.hyprland_running:
        status.hyprland_version = get_hyprland_version()

    logger.debug(f"Environment check: valid={status.is_valid}, errors={status.errors}")
    return status


def validate_environment() -> EnvironmentStatus:
    """
    Check the session and raise on the first blocking problem.

    Raises:
        HyprlandNotRunningError: If no Hyprland process exists
        MissingEnvironmentVariableError: If the session variables are unset
        SocketNotAccessibleError: If the control socket is missing
    """
    status = check_environment()
    if not status.hyprland_running:
        raise HyprlandNotRunningError()
    if status.missing_variables:
        raise MissingEnvironmentVariableError(status.missing_variables)
    if not status.socket_accessible:
        raise SocketNotAccessibleError(status.socket_path)
    return status


def format_environment_status(status: EnvironmentStatus) -> str:
    """Human-readable report for ``hyprgborder env``."""

    def mark(ok: bool) -> str:
        return "[OK]" if ok else "[FAIL]"

    lines = [
        "Hyprland Environment Status:",
        f"  {mark(status.hyprland_running)} Hyprland running",
        f"  {mark(bool(status.xdg_runtime_dir))} XDG_RUNTIME_DIR: {status.xdg_runtime_dir or 'not set'}",
        f"  {mark(bool(status.hyprland_instance_signature))} HYPRLAND_INSTANCE_SIGNATURE: "
        f"{status.hyprland_instance_signature or 'not set'}",
        f"  {mark(status.socket_accessible)} IPC socket: {status.socket_path or 'unknown'}",
    ]
    if status.hyprland_version:
        lines.append(f"  Version: {status.hyprland_version}")

    if status.errors:
        lines.append("")
        lines.append("Problems:")
        lines.extend(f"  - {error}" for error in status.errors)

    return "\n".join(lines)
