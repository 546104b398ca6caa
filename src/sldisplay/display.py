"""
Display reset sequencer.

Restores the SL MkIII column screens to a neutral state::

    knob layout
    for column in 0..7:
        for field in 0..2:
            clear text (column, field)
            set color (column, field, 127, 127, 127)

That is ``1 + 8 * 3 * 2 = 49`` messages, sent one at a time in exactly
this order. Nothing is buffered or retried: if the transport raises, the
exception reaches the caller and the messages already sent stay sent.
"""

import logging
from collections.abc import Iterator
from typing import Any, Optional

from sldisplay import sysex
from sldisplay.exceptions import ErrorContext
from sldisplay.models import ResetConfig
from sldisplay.protocols import MidiTransport

logger = logging.getLogger(__name__)

COLUMN_COUNT = 8
FIELDS_PER_COLUMN = 3
RESET_COLOR = (127, 127, 127)


def reset_messages(config: Optional[ResetConfig] = None) -> Iterator[list[int]]:
    """
    Yield the reset sequence in send order.

    Args:
        config: Grid size, color and layout (defaults reproduce the
                standard 49-message reset)
    """
    if config is None:
        layout_index = sysex.LAYOUT_KNOB
        columns, fields, color = COLUMN_COUNT, FIELDS_PER_COLUMN, RESET_COLOR
    else:
        layout_index = config.layout_index
        columns, fields = config.column_count, config.fields_per_column
        color = config.color.to_rgb_tuple()

    yield sysex.display_activate_layout_by_index(layout_index)
    for column in range(columns):
        for field in range(fields):
            yield sysex.display_set_text_of_column(column, field, "")
            yield sysex.set_display_color_of_column(column, field, *color)


def reset_display(
    device: Any, out_port: MidiTransport, config: Optional[ResetConfig] = None
) -> int:
    """
    Reset the column screens to their initial state.

    Args:
        device: Device identifier handed to ``out_port.send_midi``
        out_port: MIDI transport
        config: Optional reset settings

    Returns:
        Number of messages sent
    """
    sent = 0
    with ErrorContext(f"reset display of {device}", logger):
        for data in reset_messages(config):
            out_port.send_midi(device, data)
            sent += 1

    logger.info(f"Reset display of {device} ({sent} messages)")
    return sent
