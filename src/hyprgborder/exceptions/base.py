"""Root of the HyprGBorder exception tree.

Every error carries two messages: ``user_message`` is what the CLI prints in
its error banner, ``technical_message`` is what goes to the log file (socket
paths, OS error text, pydantic field locations).

The ``recoverable`` flag is what the preview worker reads when a frame
fails. A recoverable error (a dropped write, a compositor that hung up, a
command too long for the buffer) costs one frame; the worker keeps its
status unless the compositor stops answering. An unrecoverable one means
frames cannot be produced at all, so the worker reports ERROR straight away
and keeps retrying until a frame succeeds.
"""

from typing import Optional


class HyprGBorderError(Exception):
    """
    Base exception for all HyprGBorder errors.

    Attributes:
        user_message: Shown in the CLI error banner
        technical_message: Written to the log
        recoverable: True if the failed frame or command can simply be retried
        recovery_hint: What the user can do about it, e.g. a command to run
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if any."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
