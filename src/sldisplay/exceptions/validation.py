"""Argument validation exceptions."""

from typing import Any

from .base import SLDisplayError


class InvalidArgumentError(SLDisplayError):
    """An argument cannot be encoded into a MIDI message."""

    def __init__(self, name: str, value: Any, error_msg: str):
        """
        Initialize invalid argument error.

        Args:
            name: Parameter name
            value: The rejected value
            error_msg: Why the value was rejected
        """
        super().__init__(
            user_message=f"Invalid value for '{name}': {error_msg}",
            technical_message=f"Invalid argument {name}={value!r} ({type(value).__name__}): {error_msg}",
            recoverable=True,
        )
        self.name = name
        self.value = value
