"""Main CLI entry point for hclplan."""

import click
from .commands.convert import convert
from .commands.validate import validate
from .commands.flags import flags
from .commands.version import version as version_command
from .. import __version__


@click.group()
@click.version_option(version=__version__, prog_name="hclplan", message="%(prog)s version %(version)s")
def cli():
    """hclplan - Build Terraform plan JSON from parsed HCL configuration."""
    pass


cli.add_command(convert)
cli.add_command(validate)
cli.add_command(flags)
cli.add_command(version_command)
