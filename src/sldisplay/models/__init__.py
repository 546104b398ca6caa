"""Data models for sldisplay."""

from .color import Color
from .config import DEFAULT_CONFIG_PATH, AppConfig, ResetConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "AppConfig",
    "Color",
    "ResetConfig",
]
