"""
Custom exception hierarchy for HyprGBorder.

## Exception Hierarchy

```
HyprGBorderError (base)
├── ConfigurationError
│   ├── ConfigValidationError
│   └── ColorFormatError
├── IpcError
│   ├── InvalidSocketPathError
│   ├── ConnectionFailedError
│   ├── ConnectionLostError
│   └── BufferOverflowError
├── PreviewError
│   └── PreviewAlreadyRunningError
└── EnvironmentCheckError
    ├── HyprlandNotRunningError
    ├── MissingEnvironmentVariableError
    └── SocketNotAccessibleError
```

All custom exceptions inherit from `HyprGBorderError`, which provides
`user_message`, `technical_message`, `recoverable` and `recovery_hint`.

### Example: Rejected configuration

```python
from hyprgborder.exceptions import ConfigValidationError

raise ConfigValidationError(field="fps", value=0, error_msg="must be between 1 and 120")

# User sees: "Invalid configuration value for 'fps': must be between 1 and 120"
```

See `hyprgborder.exceptions.handlers` for utilities to handle these exceptions systematically.
"""

from .base import HyprGBorderError
from .config import ColorFormatError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorContext,
    format_error_for_display,
    handle_errors,
    wrap_validation_error,
)
from .ipc import (
    BufferOverflowError,
    ConnectionFailedError,
    ConnectionLostError,
    InvalidSocketPathError,
    IpcError,
)
from .runtime import (
    EnvironmentCheckError,
    HyprlandNotRunningError,
    MissingEnvironmentVariableError,
    PreviewAlreadyRunningError,
    PreviewError,
    SocketNotAccessibleError,
)

__all__ = [
    # Base
    "HyprGBorderError",
    # Config
    "ColorFormatError",
    "ConfigValidationError",
    "ConfigurationError",
    # IPC
    "BufferOverflowError",
    "ConnectionFailedError",
    "ConnectionLostError",
    "InvalidSocketPathError",
    "IpcError",
    # Runtime
    "EnvironmentCheckError",
    "HyprlandNotRunningError",
    "MissingEnvironmentVariableError",
    "PreviewAlreadyRunningError",
    "PreviewError",
    "SocketNotAccessibleError",
    # Handlers
    "ErrorContext",
    "format_error_for_display",
    "handle_errors",
    "wrap_validation_error",
]
