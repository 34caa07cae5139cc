"""Validate command - check a parsed module tree without converting it."""

import sys
import click
from ...ingest.module_loader import load_modules, summarize_modules
from ...utils.errors import HCLPlanError
from ..utils import resolve_file_path, format_error


@click.command()
@click.argument('modules_file', type=click.Path(exists=False))
def validate(modules_file):
    """Validate a parsed module tree file and print block counts."""
    try:
        modules_path = resolve_file_path(modules_file)
        modules = load_modules(str(modules_path))
    except FileNotFoundError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except HCLPlanError as e:
        click.echo(format_error(str(e), "Check the module tree against the expected block format."), err=True)
        sys.exit(1)
    
    summary = summarize_modules(modules)
    click.echo(
        f"Valid module tree: {summary['modules']} module(s), {summary['blocks']} block(s), "
        f"{summary['resources']} resource(s), {summary['providers']} provider(s)"
    )
