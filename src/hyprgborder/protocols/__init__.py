"""Event and observer protocol definitions."""

from .events import PreviewEvent
from .observers import PreviewObserver

__all__ = ["PreviewEvent", "PreviewObserver"]
