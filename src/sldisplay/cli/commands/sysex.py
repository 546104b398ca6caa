"""Message builder commands."""

import click

from sldisplay import sysex
from sldisplay.cli.context import CliState, pass_state
from sldisplay.cli.errors import echo_errors


def _echo(state: CliState, data: list[int]) -> None:
    click.echo(sysex.format_bytes(data, state.format))


@click.group(name="sysex")
def sysex_group():
    """Print the bytes of a single message."""
    pass


@sysex_group.command(name="layout")
@click.argument("layout_index", type=int)
@pass_state
@echo_errors("build layout message")
def layout(state: CliState, layout_index: int):
    """Activate the column screen layout LAYOUT_INDEX."""
    _echo(state, sysex.display_activate_layout_by_index(layout_index))


@sysex_group.command(name="knob")
@pass_state
def knob(state: CliState):
    """Activate the knob layout."""
    _echo(state, sysex.display_activate_layout_knob())


@sysex_group.command(name="text")
@click.argument("column", type=int)
@click.argument("field", type=int)
@click.argument("text", default="")
@pass_state
@echo_errors("build text message")
def text(state: CliState, column: int, field: int, text: str):
    """Set text FIELD of COLUMN (no TEXT clears it)."""
    _echo(state, sysex.display_set_text_of_column(column, field, text))


@sysex_group.command(name="value")
@click.argument("column", type=int)
@click.argument("object_index", metavar="OBJECT", type=int)
@click.argument("value", type=int)
@pass_state
@echo_errors("build value message")
def value(state: CliState, column: int, object_index: int, value: int):
    """Set the knob VALUE of OBJECT on COLUMN."""
    _echo(state, sysex.set_display_value_of_column(column, object_index, value))


@sysex_group.command(name="color")
@click.argument("column", type=int)
@click.argument("object_index", metavar="OBJECT", type=int)
@click.argument("rgb", nargs=3, type=int)
@pass_state
@echo_errors("build color message")
def color(state: CliState, column: int, object_index: int, rgb: tuple[int, int, int]):
    """Set the color of OBJECT on COLUMN to R G B."""
    _echo(state, sysex.set_display_color_of_column(column, object_index, *rgb))


@sysex_group.command(name="led-rgb")
@click.argument("led", type=int)
@click.argument("rgb", nargs=3, type=int)
@pass_state
@echo_errors("build LED message")
def led_rgb(state: CliState, led: int, rgb: tuple[int, int, int]):
    """Set LED to R G B."""
    _echo(state, sysex.set_led_color_rgb(led, *rgb))


@sysex_group.command(name="led")
@click.argument("led", type=int)
@click.argument("color_id", type=int)
@pass_state
@echo_errors("build LED message")
def led(state: CliState, led: int, color_id: int):
    """Set LED to palette color COLOR_ID (Control Change)."""
    _echo(state, sysex.set_led_color(led, color_id))


@sysex_group.command(name="notify")
@click.argument("line1")
@click.argument("line2", default="")
@pass_state
@echo_errors("build notification message")
def notify(state: CliState, line1: str, line2: str):
    """Show LINE1 and LINE2 in the notification area."""
    _echo(state, sysex.set_notification_text(line1, line2))
