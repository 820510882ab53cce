"""Fixed-capacity command buffer for compositor IPC."""

from hyprgborder.exceptions import BufferOverflowError

COMMAND_BUFFER_SIZE = 256


class CommandBuffer:
    """
    Preallocated byte buffer reused for every outgoing command.

    The buffer never grows: a command that does not fit raises
    BufferOverflowError and leaves the previous contents untouched.
    """

    def __init__(self, capacity: int = COMMAND_BUFFER_SIZE):
        """
        Initialize the buffer.

        Args:
            capacity: Maximum command size in bytes
        """
        self._data = bytearray(capacity)
        self._view = memoryview(self._data)
        self._length = 0

    @property
    def capacity(self) -> int:
        """Maximum command size in bytes."""
        return len(self._data)

    def __len__(self) -> int:
        return self._length

    def format_keyword(self, variable: str, value: str) -> memoryview:
        """
        Write ``keyword {variable} {value}\\n`` into the buffer.

        Args:
            variable: Compositor config path (e.g. ``general:col.active_border``)
            value: Value to set

        Returns:
            View over the formatted bytes, valid until the next write

        Raises:
            BufferOverflowError: If the command does not fit
        """
        return self.write(f"keyword {variable} {value}\n")

    def write(self, text: str) -> memoryview:
        """
        Replace the buffer contents with ``text``.

        Raises:
            BufferOverflowError: If the encoded text does not fit
        """
        encoded = text.encode("utf-8")
        size = len(encoded)
        if size > len(self._data):
            raise BufferOverflowError(required=size, capacity=len(self._data))

        self._view[:size] = encoded
        self._length = size
        return self._view[:size]

    def getvalue(self) -> bytes:
        """Copy of the current contents."""
        return bytes(self._view[:self._length])
