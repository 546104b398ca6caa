"""
Low-level SysEx message builders for the Novation SL MkIII.

SysEx on the SL MkIII
=====================

Every screen and LED command is a System Exclusive message with the same
7-byte prefix::

    [0xF0, 0x00, 0x20, 0x29, 0x02, 0x0A, 0x01, <command>, ...data, 0xF7]
     │     └──────┬──────┘  └───┬────┘  │
     │         Novation     SL MkIII    └─ Command set
     Start of SysEx

The byte after the header selects the command:

- **0x01**: Layout (choose what the column screens show)
- **0x02**: Property (text, value or colour of a column screen object)
- **0x03**: LED (set an LED to an RGB colour)
- **0x04**: Notification (two lines of text in the centre screen)

Property Messages
-----------------

Column screen properties share a layout::

    [...header, 0x02, column, property, object, ...payload, 0xF7]
                      │       │         └─ Text field / object index
                      │       └─ 0x01 text, 0x03 value, 0x04 colour
                      └─ Column 0-7

Text payloads are one byte per character followed by a 0x00 terminator.

Control Change LED Message
--------------------------

``set_led_color`` is the odd one out: it builds a plain 3-byte Control
Change on channel 16 (``[0xBF, led, colour_id]``) that selects a colour
from the device palette. It has no SysEx framing.

Key Design Principle
--------------------

**No validation of values**: this module checks argument types only.
Integers are copied into the message as given, so ranges are the caller's
responsibility. ``to_message`` is where bytes meet mido, which does
enforce the MIDI data range.

References
----------

- SL MkIII Programmer's Reference Guide
- MIDI System Exclusive specification
"""

from enum import IntEnum

import mido

from sldisplay.exceptions import InvalidArgumentError

SYSEX_START = 0xF0
SYSEX_END = 0xF7

HEADER = (SYSEX_START, 0x00, 0x20, 0x29, 0x02, 0x0A, 0x01)

LED_RGB = 0x01
LAYOUT_KNOB = 0x01
TEXT_TERMINATOR = 0x00

# Control Change, MIDI channel 16
CONTROL_CHANGE_STATUS = 0xBF


class Command(IntEnum):
    """SysEx command bytes (first byte after the header)."""

    LAYOUT = 0x01
    PROPERTY = 0x02
    LED = 0x03
    NOTIFICATION = 0x04


class Property(IntEnum):
    """Column screen property selectors."""

    TEXT = 0x01
    VALUE = 0x03
    COLOR = 0x04


def _require_int(name: str, value) -> int:
    # bool is an int subclass but never a meaningful byte
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(name, value, "must be an integer")
    return value


def _require_str(name: str, value) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError(name, value, "must be a string")
    return value


def _sysex(command: Command, *data: int) -> list[int]:
    # Plain ints only, enum members would leak into reprs
    return [int(byte) for byte in (*HEADER, command, *data, SYSEX_END)]


def encode_text(text: str) -> list[int]:
    """
    Encode text as character codes followed by a 0x00 terminator.

    Code points are copied unchanged, so non-ASCII characters produce
    values above 127.

    Args:
        text: Text to encode

    Returns:
        Character codes plus terminator ("" gives [0x00])
    """
    _require_str("text", text)
    return [ord(char) for char in text] + [TEXT_TERMINATOR]


def display_activate_layout_by_index(layout_index: int) -> list[int]:
    """
    Select the layout of the column screens.

    Args:
        layout_index: Layout type index

    Returns:
        10-byte SysEx message
    """
    return _sysex(Command.LAYOUT, _require_int("layout_index", layout_index))


def display_activate_layout_knob() -> list[int]:
    """Select the knob layout for the column screens."""
    return display_activate_layout_by_index(LAYOUT_KNOB)


def display_set_text_of_column(column_index: int, text_field_index: int, text: str) -> list[int]:
    """
    Set a text field of a column screen.

    Args:
        column_index: Column screen index (0-7)
        text_field_index: Text field index within the column
        text: Text to show ("" clears the field)

    Returns:
        SysEx message with the encoded, zero-terminated text
    """
    return _sysex(
        Command.PROPERTY,
        _require_int("column_index", column_index),
        Property.TEXT,
        _require_int("text_field_index", text_field_index),
        *encode_text(_require_str("text", text)),
    )


def set_display_value_of_column(column_index: int, object_index: int, value: int) -> list[int]:
    """
    Set the value of a knob object on a column screen.

    Args:
        column_index: Column screen index (0-7)
        object_index: Knob object index
        value: Value to display

    Returns:
        13-byte SysEx message
    """
    return _sysex(
        Command.PROPERTY,
        _require_int("column_index", column_index),
        Property.VALUE,
        _require_int("object_index", object_index),
        _require_int("value", value),
    )


def set_display_color_of_column(
    column_index: int, object_index: int, r: int, g: int, b: int
) -> list[int]:
    """
    Set the colour of an object on a column screen.

    Args:
        column_index: Column screen index (0-7)
        object_index: Object index
        r: Red
        g: Green
        b: Blue

    Returns:
        15-byte SysEx message
    """
    return _sysex(
        Command.PROPERTY,
        _require_int("column_index", column_index),
        Property.COLOR,
        _require_int("object_index", object_index),
        _require_int("r", r),
        _require_int("g", g),
        _require_int("b", b),
    )


def set_led_color_rgb(led_index: int, r: int, g: int, b: int) -> list[int]:
    """
    Set an LED to an RGB colour.

    Args:
        led_index: LED index
        r: Red
        g: Green
        b: Blue

    Returns:
        14-byte SysEx message
    """
    return _sysex(
        Command.LED,
        _require_int("led_index", led_index),
        LED_RGB,
        _require_int("r", r),
        _require_int("g", g),
        _require_int("b", b),
    )


def set_led_color(led_index: int, color_id: int) -> list[int]:
    """
    Set an LED to a palette colour.

    This is a Control Change, not a SysEx message: no header, no 0xF7.

    Args:
        led_index: LED index (controller number)
        color_id: Palette colour index

    Returns:
        3-byte Control Change message
    """
    return [
        CONTROL_CHANGE_STATUS,  # no SysEx framing
        _require_int("led_index", led_index),
        _require_int("color_id", color_id),
    ]


def set_notification_text(line1: str, line2: str) -> list[int]:
    """
    Show two lines of text in the centre screen notification area.

    Args:
        line1: Text of line 1
        line2: Text of line 2

    Returns:
        SysEx message with both lines, each zero-terminated
    """
    return _sysex(
        Command.NOTIFICATION,
        *encode_text(_require_str("line1", line1)),
        *encode_text(_require_str("line2", line2)),
    )


def to_message(data: list[int]) -> mido.Message:
    """
    Convert built bytes into a mido message.

    Args:
        data: Bytes from one of the builders

    Returns:
        ``sysex`` or ``control_change`` message

    Raises:
        InvalidArgumentError: If mido rejects the bytes (e.g. values > 127)
    """
    try:
        return mido.Message.from_bytes(list(data))
    except (ValueError, TypeError) as e:
        raise InvalidArgumentError("data", format_bytes(data), str(e)) from e


def format_bytes(data: list[int], fmt: str = "hex") -> str:
    """Render bytes as space separated hex ("F0 00 ...") or decimal."""
    if fmt == "hex":
        return " ".join(f"{byte:02X}" for byte in data)
    if fmt == "dec":
        return " ".join(str(byte) for byte in data)
    raise InvalidArgumentError("fmt", fmt, "must be 'hex' or 'dec'")
