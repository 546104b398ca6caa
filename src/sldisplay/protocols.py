"""Transport protocol used by the display sequencer."""

from typing import Any, Protocol


class MidiTransport(Protocol):
    """Anything that can deliver raw MIDI bytes to a device."""

    def send_midi(self, device: Any, data: list[int]) -> None:
        """
        Send one complete MIDI message.

        Args:
            device: Device identifier, meaning is up to the transport
            data: Message bytes as built by sldisplay.sysex

        Note:
            Errors are raised to the caller, not reported through a
            return value.
        """
        ...
