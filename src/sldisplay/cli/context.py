"""Shared CLI state."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import click

from sldisplay.models import DEFAULT_CONFIG_PATH, AppConfig


@dataclass
class CliState:
    """Options of the root command, shared with subcommands."""

    config_path: Path = DEFAULT_CONFIG_PATH
    output_format: Optional[str] = None
    _config: Optional[AppConfig] = field(default=None, repr=False)

    @property
    def config(self) -> AppConfig:
        """Configuration, loaded on first use."""
        if self._config is None:
            self._config = AppConfig.load_or_default(self.config_path)
        return self._config

    @property
    def format(self) -> str:
        """Byte format: --format wins over the config file."""
        return self.output_format or self.config.output_format


pass_state = click.make_pass_decorator(CliState, ensure=True)
