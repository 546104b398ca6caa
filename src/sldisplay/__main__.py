"""Main entry point for sldisplay."""

from sldisplay.cli.main import cli

if __name__ == "__main__":
    cli()
