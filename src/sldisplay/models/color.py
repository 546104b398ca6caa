"""Color model."""

from pydantic import BaseModel, ConfigDict, Field


class Color(BaseModel):
    """7-bit RGB color as sent to the SL MkIII screens and LEDs.

    Channels use the MIDI data range (0-127). The model is frozen so
    colors can be shared between configs and used as dict keys.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=127, description="Red (0-127)")
    g: int = Field(ge=0, le=127, description="Green (0-127)")
    b: int = Field(ge=0, le=127, description="Blue (0-127)")

    @classmethod
    def off(cls) -> "Color":
        """Create off (black) color."""
        return cls(r=0, g=0, b=0)

    @classmethod
    def gray(cls) -> "Color":
        """Create the mid-gray used when resetting the screens."""
        return cls(r=127, g=127, b=127)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to a hex string of the 7-bit channels (e.g., '#7F7F7F')."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"
