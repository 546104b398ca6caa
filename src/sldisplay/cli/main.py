"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from sldisplay import __version__
from sldisplay.models import DEFAULT_CONFIG_PATH

from .commands import config_group, reset, sysex_group
from .context import CliState

logger = logging.getLogger(__name__)

_HANDLER_NAMES = ("sldisplay-stream", "sldisplay-file")


def setup_logging(verbose: int, log_file: Optional[Path]) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        log_file: Also log to this file (optional)
    """
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Repeated invocations in one process replace our handlers
    for handler in list(root_logger.handlers):
        if handler.get_name() in _HANDLER_NAMES:
            root_logger.removeHandler(handler)
            handler.close()

    # stdout carries message bytes, so logs go to stderr
    stream_handler = logging.StreamHandler()
    stream_handler.set_name("sldisplay-stream")
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if log_file:
        # Keeps last 5 files, max 10MB each
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
        file_handler.set_name("sldisplay-file")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


@click.group()
@click.version_option(version=__version__, prog_name="sldisplay")
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Also write logs to this file'
)
@click.option(
    '--config', '-c',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help='Configuration file'
)
@click.option(
    '--format', '-f',
    'output_format',
    type=click.Choice(['hex', 'dec'], case_sensitive=False),
    default=None,
    help='Print bytes as hex or decimal (default: from config, hex)'
)
@click.pass_context
def cli(
    ctx,
    verbose: int,
    log_file: Optional[Path],
    config_path: Path,
    output_format: Optional[str]
):
    """
    SL MkIII display tools - build SysEx messages for the Novation SL MkIII.

    Messages are printed, not sent: pipe them to your MIDI tool of choice.

    \b
    Examples:
      # Text "Hi" in field 1 of column 2
      sldisplay sysex text 2 1 Hi

      # Centre screen notification
      sldisplay sysex notify "Hello" "World"

      # Full display reset sequence in decimal
      sldisplay --format dec reset
    """
    setup_logging(verbose, log_file)

    ctx.obj = CliState(
        config_path=config_path,
        output_format=output_format.lower() if output_format else None,
    )


cli.add_command(sysex_group)
cli.add_command(reset)
cli.add_command(config_group)

if __name__ == "__main__":
    cli()
