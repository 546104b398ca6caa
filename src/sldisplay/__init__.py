"""sldisplay: SysEx builders for the Novation SL MkIII screens and LEDs."""

__version__ = "0.1.0"

from . import sysex
from .display import reset_display, reset_messages
from .exceptions import InvalidArgumentError, SLDisplayError
from .protocols import MidiTransport

__all__ = [
    "InvalidArgumentError",
    "MidiTransport",
    "SLDisplayError",
    "reset_display",
    "reset_messages",
    "sysex",
]
