"""Unit tests for the SysEx message builders."""

import mido
import pytest

from sldisplay import sysex
from sldisplay.exceptions import InvalidArgumentError

HEADER = [0xF0, 0x00, 0x20, 0x29, 0x02, 0x0A, 0x01]


class TestLayout:
    """Test layout selection messages."""

    @pytest.mark.parametrize("layout_index", [0, 1, 2, 64, 127])
    def test_activate_layout_by_index(self, layout_index):
        """Test header + layout command + index + end."""
        data = sysex.display_activate_layout_by_index(layout_index)

        assert data == HEADER + [0x01, layout_index, 0xF7]
        assert len(data) == 10

    def test_activate_layout_knob(self):
        """Test knob layout equals layout index 1."""
        assert sysex.display_activate_layout_knob() == sysex.display_activate_layout_by_index(0x01)

    def test_bytes_are_plain_ints(self):
        """Test enum members don't leak into the message."""
        data = sysex.display_activate_layout_knob()

        assert all(type(byte) is int for byte in data)


class TestColumnText:
    """Test column text messages."""

    def test_text(self):
        """Test text is encoded as character codes with terminator."""
        data = sysex.display_set_text_of_column(2, 1, "Hi")

        assert data == HEADER + [0x02, 2, 0x01, 1, 72, 105, 0, 0xF7]
        assert len(data) == 15

    @pytest.mark.parametrize("column, field", [(0, 0), (3, 2), (7, 1)])
    def test_empty_text_single_terminator(self, column, field):
        """Test empty text produces exactly one zero byte."""
        data = sysex.display_set_text_of_column(column, field, "")

        assert data == HEADER + [0x02, column, 0x01, field, 0x00, 0xF7]
        assert data[11:] == [0x00, 0xF7]

    def test_non_ascii_passes_through(self):
        """Test code points are copied unchanged."""
        data = sysex.display_set_text_of_column(0, 0, "é")

        assert data[11:13] == [0xE9, 0x00]

    def test_text_must_be_string(self):
        """Test non-string text is rejected."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            sysex.display_set_text_of_column(0, 0, 42)

        assert exc_info.value.name == "text"
        assert exc_info.value.value == 42


class TestColumnValueAndColor:
    """Test column value and color messages."""

    def test_value(self):
        """Test value message layout."""
        data = sysex.set_display_value_of_column(4, 0, 99)

        assert data == HEADER + [0x02, 4, 0x03, 0, 99, 0xF7]
        assert len(data) == 13

    def test_color(self):
        """Test mid-gray color message."""
        data = sysex.set_display_color_of_column(0, 0, 127, 127, 127)

        assert data == [0xF0, 0x00, 0x20, 0x29, 0x02, 0x0A, 0x01, 0x02, 0, 0x04, 0, 127, 127, 127, 0xF7]
        assert len(data) == 15

    def test_out_of_range_values_pass_through(self):
        """Test values are not clamped or rejected."""
        data = sysex.set_display_color_of_column(-1, 200, 255, 0, 300)

        assert data[8:14] == [-1, 0x04, 200, 255, 0, 300]


class TestLed:
    """Test LED messages."""

    def test_led_rgb(self):
        """Test RGB LED SysEx message."""
        data = sysex.set_led_color_rgb(12, 127, 64, 0)

        assert data == HEADER + [0x03, 12, 0x01, 127, 64, 0, 0xF7]
        assert len(data) == 14

    def test_led_palette_color_is_control_change(self):
        """Test palette LED message is a bare 3-byte Control Change."""
        data = sysex.set_led_color(5, 3)

        assert data == [0xBF, 5, 3]
        assert 0xF0 not in data
        assert 0xF7 not in data

    def test_led_index_must_be_int(self):
        """Test bool and str are rejected as indices."""
        with pytest.raises(InvalidArgumentError):
            sysex.set_led_color(True, 3)

        with pytest.raises(InvalidArgumentError):
            sysex.set_led_color_rgb("1", 0, 0, 0)


class TestNotification:
    """Test notification text messages."""

    def test_two_lines(self):
        """Test both lines are zero-terminated."""
        data = sysex.set_notification_text("A", "B")

        assert data == [0xF0, 0x00, 0x20, 0x29, 0x02, 0x0A, 0x01, 0x04, 65, 0, 66, 0, 0xF7]

    def test_empty_lines(self):
        """Test empty lines still get terminators."""
        assert sysex.set_notification_text("", "") == HEADER + [0x04, 0, 0, 0xF7]

    def test_line_must_be_string(self):
        """Test non-string line is rejected by name."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            sysex.set_notification_text("ok", None)

        assert exc_info.value.name == "line2"


class TestStatelessness:
    """Test builders keep no state between calls."""

    def test_identical_calls_equal(self):
        """Test same arguments give equal but distinct lists."""
        first = sysex.display_set_text_of_column(1, 2, "Mix")
        second = sysex.display_set_text_of_column(1, 2, "Mix")

        assert first == second
        assert first is not second

    def test_mutating_result_does_not_leak(self):
        """Test changing a returned list doesn't affect later calls."""
        data = sysex.display_activate_layout_knob()
        data[0] = 0

        assert sysex.display_activate_layout_knob()[0] == 0xF0
        assert sysex.HEADER[0] == 0xF0


class TestEncodeText:
    """Test text encoding helper."""

    def test_encode(self):
        assert sysex.encode_text("Hi") == [72, 105, 0]

    def test_encode_empty(self):
        assert sysex.encode_text("") == [0]


class TestToMessage:
    """Test conversion to mido messages."""

    def test_sysex_message(self):
        """Test SysEx bytes become a mido sysex message without framing."""
        msg = sysex.to_message(sysex.set_notification_text("A", "B"))

        assert isinstance(msg, mido.Message)
        assert msg.type == 'sysex'
        assert list(msg.data) == [0x00, 0x20, 0x29, 0x02, 0x0A, 0x01, 0x04, 65, 0, 66, 0]

    def test_control_change_message(self):
        """Test short LED form becomes control change on channel 16."""
        msg = sysex.to_message(sysex.set_led_color(5, 3))

        assert msg.type == 'control_change'
        assert msg.channel == 15
        assert msg.control == 5
        assert msg.value == 3

    def test_out_of_range_rejected(self):
        """Test mido's data range check surfaces as InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            sysex.to_message(sysex.set_led_color_rgb(0, 255, 0, 0))


class TestFormatBytes:
    """Test byte rendering."""

    def test_hex(self):
        assert sysex.format_bytes([0xF0, 0x0A, 0xF7]) == "F0 0A F7"

    def test_dec(self):
        assert sysex.format_bytes([0xF0, 0x0A, 0xF7], "dec") == "240 10 247"

    def test_unknown_format(self):
        with pytest.raises(InvalidArgumentError):
            sysex.format_bytes([0xF0], "bin")
