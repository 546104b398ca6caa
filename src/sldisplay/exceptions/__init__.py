"""
Custom exception hierarchy for sldisplay.

## Exception Hierarchy

```
SLDisplayError (base)
├── InvalidArgumentError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions inherit from `SLDisplayError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

### Example: Wrong argument type

```python
from sldisplay import sysex

sysex.display_set_text_of_column(0, 0, 42)

# InvalidArgumentError: Invalid value for 'text': must be a string
```

Transport errors are never wrapped: whatever the MIDI output raises
reaches the caller unchanged.
"""

from .base import SLDisplayError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import ErrorContext, format_error_for_display, wrap_pydantic_error
from .validation import InvalidArgumentError

__all__ = [
    "ConfigFileInvalidError",
    "ConfigValidationError",
    # Config
    "ConfigurationError",
    "ErrorContext",
    # Validation
    "InvalidArgumentError",
    # Base
    "SLDisplayError",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
]
