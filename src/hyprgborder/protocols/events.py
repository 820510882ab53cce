"""Preview lifecycle events."""

from enum import Enum


class PreviewEvent(Enum):
    """Events published by the preview worker."""

    STARTED = "started"  # Worker thread is rendering frames
    STOPPED = "stopped"  # Worker stopped and the border was restored
    ERROR = "error"  # Compositor unreachable; frames are being retried
    RECOVERED = "recovered"  # A frame succeeded after an error
    CONFIG_APPLIED = "config_applied"  # Worker picked up a new configuration
