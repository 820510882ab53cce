"""Preview engine: configuration hand-off, status tracking and the frame loop."""

from .config_gate import ConfigGate
from .preview import ERROR_BACKOFF, PreviewWorker
from .status import StatsTracker, StatusCell

__all__ = [
    "ERROR_BACKOFF",
    "ConfigGate",
    "PreviewWorker",
    "StatsTracker",
    "StatusCell",
]
