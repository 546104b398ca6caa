"""mido-backed MIDI transport."""

import logging
from typing import Any

import mido

from sldisplay.sysex import format_bytes, to_message

logger = logging.getLogger(__name__)


class MidoTransport:
    """
    Send built messages through a mido output port.

    Wraps any object with a mido-style ``send(message)`` method, usually
    the result of ``mido.open_output(...)``. Opening and closing the port
    stay with the caller.
    """

    def __init__(self, port: mido.ports.BaseOutput):
        """
        Initialize transport.

        Args:
            port: Open mido output port
        """
        self.port = port

    def send_midi(self, device: Any, data: list[int]) -> None:
        """
        Convert bytes to a mido message and send it.

        Raises:
            InvalidArgumentError: If the bytes are not a valid MIDI message
        """
        message = to_message(data)
        logger.debug(f"-> {device}: {format_bytes(data)}")
        self.port.send(message)
