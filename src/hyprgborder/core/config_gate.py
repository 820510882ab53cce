"""Single-slot configuration hand-off between the UI and the preview thread."""

import logging
import threading

from hyprgborder.models import AnimationConfig

logger = logging.getLogger(__name__)


class ConfigGate:
    """
    Copy-on-write holder for the active AnimationConfig.

    The UI thread publishes new configurations with ``update_config()``; the
    preview thread polls ``take_changed()`` once per frame and reads
    ``current()``. The gate installs the fresh object built by
    ``validate_config()``, so the caller may keep mutating the one it passed in
    and the worker only ever sees coerced, checked values.

    The stored value is never mutated in place: every update installs a new
    object, so a reader holding the previous reference keeps a complete value.
    """

    def __init__(self, config: AnimationConfig | None = None):
        """
        Initialize the gate.

        Args:
            config: Initial configuration (default rainbow if None). Copied.

        Raises:
            ConfigValidationError: If config is invalid
        """
        initial = config if config is not None else AnimationConfig.default()
        self._config = initial.validate_config()
        self._lock = threading.Lock()
        self._changed = True

    def update_config(self, config: AnimationConfig) -> bool:
        """
        Validate and install a new configuration.

        Args:
            config: Caller-owned configuration

        Returns:
            True if installed, False if the new copy could not be allocated (the
            previous configuration stays active)

        Raises:
            ConfigValidationError: If the configuration is invalid; nothing
                                   is changed
        """
        try:
            new_config = config.validate_config()
        except MemoryError:
            logger.error("Out of memory copying configuration; keeping previous one")
            return False

        with self._lock:
            self._config = new_config
            self._changed = True

        logger.debug(
            f"Configuration updated: {new_config.animation_type.value} "
            f"@ {new_config.fps} FPS, {len(new_config.colors)} color(s)"
        )
        return True

    def current(self) -> AnimationConfig:
        """The installed configuration. Treat as read-only."""
        with self._lock:
            return self._config

    def snapshot(self) -> AnimationConfig:
        """Deep copy of the installed configuration, safe to edit."""
        return self.current().model_copy(deep=True)

    def take_changed(self) -> bool:
        """Return the changed flag and clear it."""
        with self._lock:
            changed = self._changed
            self._changed = False
            return changed

    def mark_changed(self) -> None:
        """Force the next ``take_changed()`` to report a change."""
        with self._lock:
            self._changed = True

    @property
    def changed(self) -> bool:
        """Peek at the changed flag without clearing it."""
        return self._changed
