"""MIDI transports."""

from .transport import MidoTransport

__all__ = ["MidoTransport"]
