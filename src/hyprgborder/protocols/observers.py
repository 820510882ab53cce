"""Observer protocols for the preview worker."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from hyprgborder.models import PreviewStatus

from .events import PreviewEvent


@runtime_checkable
class PreviewObserver(Protocol):
    """
    Receives preview lifecycle events.

    Lets a UI refresh its status display without polling.
    """

    def on_preview_event(self, event: PreviewEvent, status: "PreviewStatus") -> None:
        """
        Handle a preview event.

        Args:
            event: What happened
            status: Worker status after the event

        Note:
            Called from the preview thread (and from the caller's thread for
            STOPPED), so implementations must be thread-safe and must not
            call back into the worker's ``stop()``.
        """
        ...
