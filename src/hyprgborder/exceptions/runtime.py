"""Preview lifecycle and environment exceptions."""

from .base import HyprGBorderError


class PreviewError(HyprGBorderError):
    """The live preview could not be started or controlled."""
    pass


class PreviewAlreadyRunningError(PreviewError):
    """Another preview worker is already running in this process."""

    def __init__(self):
        super().__init__(
            user_message="A live preview is already running.",
            technical_message="Refused to start a second PreviewWorker in the same process",
            recoverable=True,
            recovery_hint="Stop the running preview before starting a new one",
        )


class EnvironmentCheckError(HyprGBorderError):
    """The Hyprland environment is not usable."""
    pass


class HyprlandNotRunningError(EnvironmentCheckError):
    """No Hyprland process was found."""

    def __init__(self):
        super().__init__(
            user_message="Hyprland is not running. Please start Hyprland first.",
            technical_message="pgrep -x Hyprland found no process",
            recoverable=False,
        )


class MissingEnvironmentVariableError(EnvironmentCheckError):
    """XDG_RUNTIME_DIR or HYPRLAND_INSTANCE_SIGNATURE is not set."""

    def __init__(self, missing: list[str]):
        """
        Initialize missing environment variable error.

        Args:
            missing: Names of the variables that are not set
        """
        names = ", ".join(missing)
        super().__init__(
            user_message=f"Required environment variables are not set: {names}",
            technical_message=f"Missing environment variables: {names}",
            recoverable=False,
            recovery_hint="XDG_RUNTIME_DIR and HYPRLAND_INSTANCE_SIGNATURE are set by Hyprland",
        )
        self.missing = missing


class SocketNotAccessibleError(EnvironmentCheckError):
    """The Hyprland IPC socket does not exist or is not a socket."""

    def __init__(self, socket_path: str):
        super().__init__(
            user_message="Cannot access Hyprland IPC socket. Check if Hyprland is running properly.",
            technical_message=f"Socket not accessible: {socket_path}",
            recoverable=False,
        )
        self.socket_path = socket_path
