"""Error reporting for CLI commands."""

import logging
import sys
from functools import wraps
from typing import Callable

import click

from sldisplay.exceptions import SLDisplayError, format_error_for_display

logger = logging.getLogger(__name__)


def echo_errors(operation_name: str) -> Callable:
    """
    Decorator turning library errors into a clean message and exit code 1.

    Only SLDisplayError is handled; anything else keeps its traceback.

    Args:
        operation_name: Name of the operation for logging (e.g., "build text message")
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except SLDisplayError as e:
                logger.error(f"Failed to {operation_name}: {e.technical_message}")

                user_message, recovery_hint = format_error_for_display(e)
                click.echo(f"ERROR: {user_message}", err=True)
                if recovery_hint:
                    click.echo(f"\n{recovery_hint}", err=True)
                sys.exit(1)

        return wrapper
    return decorator
