"""Version command - show hclplan version."""

import click
from ... import __version__


@click.command()
def version():
    """Show hclplan version."""
    click.echo(f"hclplan version {__version__}")
