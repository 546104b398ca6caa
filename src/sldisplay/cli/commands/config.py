"""Configuration commands."""

import click

from sldisplay.cli.context import CliState, pass_state
from sldisplay.cli.errors import echo_errors
from sldisplay.models import AppConfig


@click.group(name="config")
def config_group():
    """Show or create the configuration file."""
    pass


@config_group.command(name="show")
@pass_state
@echo_errors("load configuration")
def show(state: CliState):
    """Print the effective configuration as JSON."""
    click.echo(state.config.model_dump_json(indent=2))


@config_group.command(name="path")
@pass_state
def path(state: CliState):
    """Print the configuration file path."""
    click.echo(str(state.config_path))


@config_group.command(name="init")
@click.option("--force", is_flag=True, help="Overwrite an existing file (a .bak copy is kept)")
@pass_state
@echo_errors("write configuration")
def init(state: CliState, force: bool):
    """Write a configuration file with default values."""
    if state.config_path.exists() and not force:
        click.echo(f"Config already exists: {state.config_path} (use --force to overwrite)")
        return

    AppConfig().save(state.config_path)
    click.echo(f"Wrote {state.config_path}")
