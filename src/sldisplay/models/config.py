"""Application configuration model."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from sldisplay.models.color import Color
from sldisplay.utils.persistence import PydanticPersistence

DEFAULT_CONFIG_PATH = Path.home() / ".sldisplay" / "config.json"


class ResetConfig(BaseModel):
    """What the display reset sends."""

    layout_index: int = Field(
        default=0x01, ge=0, le=127, description="Layout activated first (0x01 = knob layout)"
    )
    column_count: int = Field(default=8, ge=0, le=8, description="Number of column screens to clear")
    fields_per_column: int = Field(
        default=3, ge=0, description="Text fields cleared per column screen"
    )
    color: Color = Field(default_factory=Color.gray, description="Color applied to every field")


class AppConfig(BaseModel):
    """Application configuration and settings."""

    device_id: str = Field(
        default="SL MkIII", description="Device label passed to the MIDI transport"
    )
    output_format: Literal["hex", "dec"] = Field(
        default="hex", description="How the CLI prints message bytes"
    )
    reset: ResetConfig = Field(
        default_factory=ResetConfig, description="Display reset settings"
    )

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.sldisplay/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH

        PydanticPersistence.save_json(self, path)
