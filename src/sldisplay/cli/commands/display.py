"""Display reset command."""

import logging
from typing import Any

import click

from sldisplay import sysex
from sldisplay.cli.context import CliState, pass_state
from sldisplay.cli.errors import echo_errors
from sldisplay.display import reset_display

logger = logging.getLogger(__name__)


class EchoTransport:
    """Transport that prints each message instead of sending it."""

    def __init__(self, fmt: str = "hex"):
        self.fmt = fmt

    def send_midi(self, device: Any, data: list[int]) -> None:
        click.echo(sysex.format_bytes(data, self.fmt))


@click.command(name="reset")
@pass_state
@echo_errors("reset display")
def reset(state: CliState):
    """
    Print the display reset sequence, one message per line.

    The sequence activates the knob layout, then clears every text field
    of every column screen and sets it to the configured color.
    """
    config = state.config
    count = reset_display(config.device_id, EchoTransport(state.format), config.reset)
    logger.info(f"Printed {count} reset messages")
