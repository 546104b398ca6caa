"""CLI commands for sldisplay."""

from .config import config_group
from .display import reset
from .sysex import sysex_group

__all__ = ["config_group", "reset", "sysex_group"]
